"""
Implements the triangles from which the kite and dart (P2) Penrose tiling is
built, and the deflation rules by which each is replaced with smaller ones.
"""


import math

import numpy as np
from scipy.constants import golden as GOLDEN_RATIO


# The golden ratio. Relates the edge lengths of the triangles to each other
PHI = GOLDEN_RATIO

# Length of the base of the default root triangle
BASE_LENGTH = 900

KITE_TYPES = (0, 1)
DART_TYPES = (2, 3)


class PenroseError(ValueError):
	"""Base class for the errors raised when generating a tiling"""


class InvalidTriangleType(PenroseError):
	"""A triangle type outside {0, 1, 2, 3}"""


class InvalidGeometry(PenroseError):
	"""A triangle vertex which is not a 2D point"""


class InvalidDepth(PenroseError):
	"""A negative (or non-integer) deflation depth"""


class DepthTooLarge(PenroseError):
	"""
	A deflation depth beyond the point at which floating point errors become
	visible in the tiling
	"""


class Triangle:
	"""
	One half of either a kite or a dart tile.

	The triangle is isosceles, with the two equal edges meeting at p1 and
	the edge from p2 to p3 forming the base. For kite halves the equal
	edges are longer than the base by a factor of phi, and for dart halves
	they are shorter by the same factor.

	Attributes:
	  type              An integer in {0,1,2,3}. 0 and 1 are mirror images
	                    of each other and together form a kite, while 2 and 3
	                    likewise form a dart.
	  p1, p2, p3        Read-only 1D numpy arrays of length 2 containing the
	                    cartesian coordinates of the vertices
	  is_interior       Whether the triangle has been deflated further (so
	                    is not itself a tile of the final tiling)
	"""

	def __init__(self, type, p1, p2, p3, is_interior=False):
		if isinstance(type, bool) or type not in (0, 1, 2, 3):
			raise InvalidTriangleType(f"Invalid triangle type {type!r}")
		self.type = int(type)
		self.p1, self.p2, self.p3 = (_as_point(p) for p in (p1, p2, p3))
		self.is_interior = is_interior

	def __repr__(self):
		return (f"Triangle({self.type}, {tuple(self.p1)}, {tuple(self.p2)}, "
		        f"{tuple(self.p3)}, is_interior={self.is_interior})")

	@property
	def is_kite(self):
		return self.type in KITE_TYPES

	@property
	def is_dart(self):
		return self.type in DART_TYPES

	@property
	def points(self):
		return self.p1, self.p2, self.p3

	@property
	def base_length(self):
		return self.edge_length(2, 3)

	def edge_length(self, i, j):
		"""
		Returns the distance between two of the triangle's vertices, given
		by their numbers (1, 2 or 3)
		"""
		points = self.points
		return norm(points[i-1] - points[j-1])

	def area(self):
		"""Returns the area of the triangle"""
		(x1, y1), (x2, y2), (x3, y3) = self.points
		return abs((x2-x1)*(y3-y1) - (x3-x1)*(y2-y1)) / 2

	def to_record(self):
		"""
		Returns the triangle as a tuple (type, p1, p2, p3, is_interior), with
		each point as a 2-tuple of floats
		"""
		return (self.type, *(tuple(float(c) for c in p) for p in self.points),
		        self.is_interior)


def subdivide(triangle, triangle_filter=None):
	"""
	Performs one deflation of triangle and returns a list of its children.

	Half kites (types 0 and 1) are replaced by two half kites and one half
	dart, and half darts (types 2 and 3) by one of each. The triangle itself
	is left untouched.

	Arguments:
	  triangle          The Triangle to deflate
	  triangle_filter   A callable which is passed each new child as soon
	                    as it is created and returns either the triangle to
	                    keep or None to discard it. The returned list
	                    contains whatever the filter returned, so discarded
	                    children appear as None. If unspecified, every
	                    child is kept.
	"""
	if triangle_filter is None: triangle_filter = (lambda tri: tri)
	p1, p2, p3 = triangle.points
	base_length = norm(p2 - p3)
	if triangle.is_kite:
		side_length = base_length * PHI
	else:
		side_length = base_length / PHI
	ratio = base_length / side_length
	# 0 and 1 are mirrors of each other, as are 2 and 3. In each case the
	# new vertices divide an existing edge in the golden ratio.
	if triangle.type == 0:
		new_pt_1 = p1 + ratio * (p2 - p1)
		new_pt_2 = p3 + ratio * (p1 - p3)
		children = [
			(2, new_pt_2, p1, new_pt_1),
			(1, p3, new_pt_2, new_pt_1),
			(0, p3, new_pt_1, p2),
		]
	elif triangle.type == 1:
		new_pt_1 = p2 + ratio * (p1 - p2)
		new_pt_2 = p1 + ratio * (p3 - p1)
		children = [
			(3, new_pt_1, new_pt_2, p1),
			(0, p2, new_pt_2, new_pt_1),
			(1, p2, p3, new_pt_2),
		]
	elif triangle.type == 2:
		new_pt_1 = p2 + (side_length / base_length) * (p3 - p2)
		children = [
			(2, new_pt_1, p3, p1),
			(1, p2, new_pt_1, p1),
		]
	else:
		new_pt_1 = p2 + (side_length / (PHI * base_length)) * (p3 - p2)
		children = [
			(3, new_pt_1, p1, p2),
			(0, p3, p1, new_pt_1),
		]
	return [triangle_filter(Triangle(*child)) for child in children]


def root_height(base_length=BASE_LENGTH):
	"""
	Returns the height of the root half dart with the specified base length
	"""
	return (base_length / 2) * math.tan(math.pi / 5)


def root_triangle(base_length=BASE_LENGTH):
	"""
	Returns the half dart from which the whole tiling is generated.

	The base runs horizontally from (0, h) to (base_length, h) with the apex
	at (base_length/2, 0), where h is given by root_height(). The coordinates
	are those of a screen, so the apex is at the top.
	"""
	height = root_height(base_length)
	return Triangle(
		2,
		(base_length / 2, 0),
		(0, height),
		(base_length, height))


def _as_point(point):
	try:
		point = np.array(point, dtype=float)
	except (TypeError, ValueError) as e:
		raise InvalidGeometry(f"{point!r} is not a 2D point") from e
	if point.shape != (2,):
		raise InvalidGeometry(f"{point.tolist()!r} is not a 2D point")
	point.flags.writeable = False
	return point


def norm(vector):
	"""
	Returns the magnitude of a vector (passed as a 1D numpy array)
	"""
	return np.sqrt(np.square(vector).sum())
