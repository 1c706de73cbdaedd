# geometry.py -- lane placement and rectangle overlap


def lane_to_x(config, lane, item_width=None):
    """Left edge of an item of ``item_width`` centered in ``lane``.

    Defaults to the player width so player and obstacles line up when their
    widths match.
    """
    if item_width is None:
        item_width = config.player_width
    lane_w = config.lane_width
    return lane * lane_w + (lane_w - item_width) / 2


def rects_overlap(a, b):
    # (x, y, w, h); shared edges do not count
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by
