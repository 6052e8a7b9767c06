"""Built-in reference tables for the second floor."""

# Tag id (decimal bytes, concatenated) -> room number
TAG_TO_ROOM = {
    "297851516128": "207",
    "2920324750516128": "214",
    "2924451516128": "215",
    "292102051516128": "223",
}

# Node -> [(distance, neighbor), ...]. Rooms hang off their corridor
# waypoint ("k-<room>"); bare "k-<n>" nodes are junctions.
NAVIGATION_GRAPH = {
    "201": [(1.0, "k-201")],
    "202": [(1.0, "k-202")],
    "203": [(1.0, "k-203")],
    "204": [(1.0, "k-204")],
    "205": [(1.0, "k-205")],
    "206": [(1.0, "k-206")],
    "207": [(1.0, "k-207")],
    "208": [(1.0, "k-208")],
    "211": [(1.0, "k-211")],
    "212": [(1.0, "k-212")],
    "213": [(1.0, "k-213")],
    "214": [(1.0, "k-214")],
    "215": [(1.0, "k-215")],
    "216": [(1.0, "k-216")],
    "217": [(1.0, "k-217")],
    "218": [(1.0, "k-218")],
    "219": [(1.0, "k-219")],
    "220": [(1.0, "k-220")],
    "221": [(1.0, "k-221")],
    "222": [(1.0, "k-222")],
    "223": [(1.0, "k-223")],
    "224": [(1.0, "k-224")],
    "225": [(1.0, "k-225")],
    "226": [(1.0, "k-226")],
    "227": [(1.0, "k-227")],
    "228": [(1.0, "k-228")],
    "229": [(1.0, "k-229")],
    "wc1": [(1.0, "k-wc1")],
    "wc2": [(1.0, "k-wc2")],

    "k-201": [(7.0, "k-2"), (1.0, "k-202"), (1.0, "201")],
    "k-202": [(1.0, "k-201"), (0.6, "k-5"), (1.0, "202")],
    "k-203": [(0.4, "k-5"), (2.0, "k-204"), (1.0, "203")],
    "k-204": [(2.0, "k-203"), (1.0, "k-205"), (1.0, "204")],
    "k-205": [(1.0, "k-204"), (1.0, "k-206"), (1.0, "205")],
    "k-206": [(1.0, "k-205"), (1.0, "k-207"), (1.0, "206")],
    "k-207": [(1.0, "k-206"), (0.5, "k-208"), (1.0, "207")],
    "k-208": [(0.5, "k-207"), (5.0, "k-4"), (1.0, "208")],
    "k-211": [(1.0, "k-4"), (1.0, "k-212"), (1.0, "211")],
    "k-212": [(1.0, "k-211"), (1.0, "k-213"), (1.0, "212")],
    "k-213": [(1.0, "k-212"), (0.6, "k-216"), (1.0, "213")],
    "k-214": [(0.6, "k-216"), (1.0, "k-215"), (1.0, "214")],
    "k-215": [(1.0, "k-214"), (3.5, "k-wc2"), (1.0, "215")],
    "k-216": [(0.6, "k-213"), (0.6, "k-214"), (1.0, "216")],
    "k-217": [(1.5, "k-1"), (0.5, "k-wc1"), (1.0, "217")],
    "k-218": [(0.5, "k-228"), (0.5, "k-219"), (1.0, "218")],
    "k-219": [(0.5, "k-218"), (0.5, "k-220"), (1.0, "219")],
    "k-220": [(0.5, "k-219"), (0.2, "k-227"), (1.0, "220")],
    "k-221": [(0.6, "k-225"), (0.3, "k-226"), (1.0, "221")],
    "k-222": [(0.3, "k-224"), (1.0, "k-225"), (1.0, "222")],
    "k-223": [(1.5, "k-224"), (1.0, "223")],
    "k-224": [(1.5, "k-223"), (0.3, "k-222"), (1.0, "224")],
    "k-225": [(1.0, "k-222"), (0.6, "k-221"), (1.0, "225")],
    "k-226": [(0.3, "k-221"), (1.5, "k-227"), (1.0, "226")],
    "k-227": [(0.2, "k-220"), (1.5, "k-226"), (1.0, "227")],
    "k-228": [(0.5, "k-218"), (0.5, "k-wc1"), (1.0, "228")],
    "k-229": [(0.5, "k-217"), (0.5, "k-wc1"), (1.0, "229")],

    "k-wc1": [(0.5, "k-228"), (0.5, "k-229"), (1.0, "wc1")],
    "k-wc2": [(1.5, "k-5"), (3.5, "k-215"), (1.0, "wc2")],
    "k-1": [(1.5, "k-217"), (1.0, "k-2")],
    "k-2": [(1.0, "k-1"), (5.0, "k-3"), (7.0, "k-201")],
    "k-3": [(5.0, "k-2")],
    "k-4": [(1.0, "k-211"), (5.0, "k-208")],
    "k-5": [(0.6, "k-202"), (0.4, "k-203"), (1.5, "k-wc2")],
}

# Node -> (x, y) in floor-plan pixels
COORDINATES = {
    "201": (1300, 283),
    "202": (1383, 283),
    "203": (1463, 283),
    "204": (1615, 283),
    "205": (1695, 283),
    "206": (1779, 283),
    "207": (1863, 283),
    "208": (1921, 424),
    "211": (1787, 812),
    "212": (1703, 812),
    "213": (1620, 812),
    "214": (1513, 812),
    "215": (1343, 756),
    "216": (1562, 614),
    "217": (701, 368),
    "218": (558, 368),
    "219": (525, 368),
    "220": (493, 368),
    "221": (340, 368),
    "222": (175, 368),
    "223": (28, 178),
    "224": (150, 178),
    "225": (280, 178),
    "226": (360, 178),
    "227": (480, 178),
    "228": (588, 178),
    "229": (665, 178),
    "k-201": (1300, 376),
    "k-202": (1383, 376),
    "k-203": (1463, 376),
    "k-204": (1615, 376),
    "k-205": (1695, 376),
    "k-206": (1779, 376),
    "k-207": (1863, 376),
    "k-208": (1863, 424),
    "k-211": (1787, 756),
    "k-212": (1703, 756),
    "k-213": (1620, 756),
    "k-214": (1513, 756),
    "k-215": (1433, 756),
    "k-216": (1562, 756),
    "k-217": (701, 279),
    "k-218": (558, 279),
    "k-219": (525, 279),
    "k-220": (493, 279),
    "k-221": (340, 279),
    "k-222": (175, 279),
    "k-223": (28, 279),
    "k-224": (150, 279),
    "k-225": (280, 279),
    "k-226": (360, 279),
    "k-227": (480, 279),
    "k-228": (558, 279),
    "k-229": (665, 279),
    "k-1": (812, 279),
    "k-2": (812, 376),
    "k-3": (812, 729),
    "k-4": (1863, 756),
    "k-5": (1433, 376),
    "wc1": (628, 368),
    "wc2": (1349, 503),
    "k-wc1": (628, 279),
    "k-wc2": (1433, 503),
}

# Floor-plan -> screen transform used by the original app
PROJECTION = {
    "offset_x": 720.0,
    "offset_y": 155.0,
    "scale_x": 0.73,
    "scale_y": 0.72,
    "color": "red",
    "stroke_width": 5.0,
}
