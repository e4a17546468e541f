"""Rendering subpackage.

Turns immutable ``State`` snapshots into pictures. Rendering is a pure
projection: :func:`twin_exit.renderer.frame.frame_elements` lists what to
draw in paint order, :func:`twin_exit.renderer.frame.render` paints it with
Pillow. No game logic lives here.
"""
