from campuspaths.model.point import Point


def test_point_value_semantics():
    assert Point(1.0, 2.0) == Point(1.0, 2.0)
    assert hash(Point(1.0, 2.0)) == hash(Point(1.0, 2.0))
    assert Point(1.0, 2.0) != Point(2.0, 1.0)


def test_point_ordering():
    points = [Point(2.0, 0.0), Point(1.0, 5.0), Point(1.0, 2.0)]
    assert sorted(points) == [Point(1.0, 2.0), Point(1.0, 5.0), Point(2.0, 0.0)]


def test_point_dict_round_trip():
    p = Point(12.5, -3.0)
    assert p.to_dict() == {"x": 12.5, "y": -3.0}
    assert Point.from_dict({"x": "12.5", "y": -3}) == p


def test_point_str():
    assert str(Point(1.0, 2.25)) == "(1.000, 2.250)"
