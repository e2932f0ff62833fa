import matplotlib
import numpy as np
import pytest

from penrose_tilings import PHI, Triangle

matplotlib.use("Agg")


def reflect(point):
	"""Reflects a point in the y axis"""
	return np.array([-point[0], point[1]])


def mirror(triangle):
	"""
	Returns the mirror image of a triangle (reflected in the y axis), which
	has the mirror type and its base vertices swapped
	"""
	return Triangle(
		triangle.type ^ 1,
		reflect(triangle.p1),
		reflect(triangle.p3),
		reflect(triangle.p2))


def isosceles(type, base_length=100, apex=(0, 0)):
	"""
	Returns a triangle of the specified type with a horizontal base of the
	specified length below its apex
	"""
	if type in (0, 1):
		side_length = base_length * PHI
	else:
		side_length = base_length / PHI
	height = np.sqrt(side_length**2 - (base_length / 2)**2)
	x, y = apex
	return Triangle(
		type,
		(x, y),
		(x - base_length/2, y + height),
		(x + base_length/2, y + height))


@pytest.fixture
def half_kite():
	return isosceles(0)


@pytest.fixture
def half_dart():
	return isosceles(2)
