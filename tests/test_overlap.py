import numpy as np
import pytest

from overlap import (
	BUFFER, TOLERANCE, Rectangle, _edge_crosses, line_intersection, overlaps,
	random_region)
from penrose_tilings import Triangle, root_height, root_triangle
from tile_tree import MAX_SAFE_DEPTH, estimate_depth


@pytest.fixture
def root():
	return root_triangle(900)


def test_triangle_inside_rectangle():
	tri = Triangle(2, (50, 20), (30, 60), (70, 60))
	assert overlaps(tri, Rectangle(0, 0, 100))


def test_rectangle_inside_triangle(root):
	# No vertex of the root lies in the region, but every corner of the
	# region lies in the root
	assert overlaps(root, Rectangle(430, 200, 40))


def test_rectangle_containing_whole_triangle(root):
	assert overlaps(root, Rectangle(-100, -100, 1100))


def test_disjoint_bounding_boxes(root):
	assert not overlaps(root, Rectangle(1000, 0, 50))
	assert not overlaps(root, Rectangle(0, 400, 50))


def test_region_beside_leg_is_disjoint(root):
	# Within the bounding box of the root, but outside the triangle itself
	assert not overlaps(root, Rectangle(20, 20, 50))
	assert not overlaps(root, Rectangle(830, 20, 50))


def test_region_straddling_leg(root):
	# The leg from (450, 0) to (0, h) passes through (225, h/2)
	h = root_height(900)
	assert overlaps(root, Rectangle(215, int(h / 2) - 10, 20))


def test_edges_crossing_without_contained_points():
	# A sliver which passes right through the region, so only its edges
	# give the overlap away. Its base is vertical.
	sliver = Triangle(2, (-100, 50), (200, 45), (200, 55))
	assert overlaps(sliver, Rectangle(0, 0, 100))


def test_vertical_leg_crossing_region():
	tri = Triangle(0, (50, -100), (50, 200), (60, 200))
	assert overlaps(tri, Rectangle(0, 0, 100))


def test_tolerance_band():
	# A vertex just beyond the right hand edge of the region
	near = Triangle(2, (100 + TOLERANCE - 1, 50), (300, 0), (300, 100))
	far = Triangle(2, (100 + TOLERANCE + 5, 50), (300, 0), (300, 100))
	rect = Rectangle(0, 0, 100)
	assert overlaps(near, rect)
	assert not overlaps(far, rect)
	assert overlaps(far, rect, tolerance=10)


def test_region_behind_apex_is_disjoint(root):
	# Directly above the apex: on the line from the base through the apex,
	# but on the wrong side of it
	assert not overlaps(root, Rectangle(440, -60, 20))


def test_region_directly_below_apex(root):
	# The left hand corners share the apex's x coordinate, so the line from
	# the apex through them is vertical
	assert overlaps(root, Rectangle(450, 200, 40))
	assert not overlaps(root, Rectangle(450, -60, 20))


@pytest.mark.parametrize("start, end, axis, value, expected", [
	# Vertical edge along the side x = 2, from y = 0 to y = 100
	((0, -50), (0, 150), 0, 2, True),
	((0, 20), (0, 80), 0, 2, True),
	((0, 150), (0, 300), 0, 2, False),
	((0, -50), (0, 150), 0, 2 + TOLERANCE + 1, False),
	# Horizontal edge along the side y = 100, from x = 0 to x = 100
	((-50, 101), (150, 101), 1, 100, True),
	((-200, 101), (-50, 101), 1, 100, False),
])
def test_edge_parallel_to_side(start, end, axis, value, expected):
	start, end = np.array(start, dtype=float), np.array(end, dtype=float)
	assert _edge_crosses(start, end, axis, value, 0, 100, TOLERANCE) == expected


def test_leg_lying_along_side_of_region():
	# The vertical leg runs 2 units to the left of the region, and the rest
	# of the triangle extends away from it
	tri = Triangle(0, (0, -100), (0, 200), (-10, 200))
	rect = Rectangle(2, -50, 100)
	assert overlaps(tri, rect)
	assert not overlaps(tri, rect, tolerance=1)
	assert not overlaps(tri, Rectangle(2, 250, 100))


def test_line_intersection():
	assert np.allclose(line_intersection((0, 0), (2, 2), (0, 2), (2, 0)), (1, 1))
	assert np.allclose(line_intersection((0, 0), (0, 10), (-5, 5), (5, 5)), (0, 5))
	assert np.allclose(line_intersection((-5, 5), (5, 5), (3, 0), (3, 1)), (3, 5))


def test_parallel_lines_do_not_intersect():
	assert line_intersection((0, 0), (1, 1), (0, 1), (1, 2)) is None
	assert line_intersection((0, 0), (0, 1), (1, 0), (1, 1)) is None


def point_in_triangle(point, triangle):
	point = np.array(point, dtype=float)
	p1, p2, p3 = triangle.points
	sub_areas = sum(
		Triangle(0, point, a, b).area() for a, b in ((p1, p2), (p2, p3), (p3, p1)))
	return sub_areas == pytest.approx(triangle.area())


@pytest.mark.parametrize("seed", range(25))
def test_random_region_lies_within_root(seed, root):
	rect = random_region(900, BUFFER, np.random.default_rng(seed))
	assert rect.length >= BUFFER
	assert rect.y >= BUFFER
	for x in (rect.x, rect.x + rect.length):
		for y in (rect.y, rect.y + rect.length):
			assert point_in_triangle((x, y), root)
	assert overlaps(root, rect)
	assert estimate_depth(rect.length, 900) <= MAX_SAFE_DEPTH


def test_random_region_is_reproducible():
	assert (random_region(rng=np.random.default_rng(3))
	        == random_region(rng=np.random.default_rng(3)))
