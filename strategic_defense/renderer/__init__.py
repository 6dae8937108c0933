"""Rendering subpackage.

Turns immutable round ``State`` snapshots into Pillow images for front ends.
See :mod:`strategic_defense.renderer.board` for the palette and drawing
routine.
"""
