# movement.py -- per-tick fall and off-screen pruning


def advance_obstacles(obstacles, speed, height):
    """Move every obstacle down by ``speed`` and keep the ones still on screen.

    Survivors keep their spawn order.
    """
    for ob in obstacles:
        ob.update(speed)
    return [ob for ob in obstacles if ob.y < height]
