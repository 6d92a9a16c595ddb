from __future__ import annotations

import math


def clamp(x, a, b):
    return a if x < a else b if x > b else x


def hsv_to_rgb(h, s, v):
    # h: 0..1
    i = int(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)
    i = i % 6
    if i == 0: r, g, b = v, t, p
    elif i == 1: r, g, b = q, v, p
    elif i == 2: r, g, b = p, v, t
    elif i == 3: r, g, b = p, q, v
    elif i == 4: r, g, b = t, p, v
    else: r, g, b = v, p, q
    return int(r*255), int(g*255), int(b*255)


def star_points(cx, cy, r_outer, r_inner, points, ang):
    # alternating outer/inner vertices, first outer vertex at angle ang
    out = []
    n = max(2, int(points)) * 2
    for k in range(n):
        r = r_outer if k % 2 == 0 else r_inner
        a = ang + math.pi * k / (n / 2)
        out.append((cx + math.cos(a) * r, cy + math.sin(a) * r))
    return out
