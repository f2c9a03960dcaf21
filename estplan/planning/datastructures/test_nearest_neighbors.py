# Copyright 2025-2026 Dimensional Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import numpy as np
import pytest

from estplan.planning.datastructures import NearestNeighborsKDTree, NearestNeighborsLinear


def _linear():
    return NearestNeighborsLinear(lambda a, b: float(np.linalg.norm(a - b)))


def _kdtree():
    return NearestNeighborsKDTree(lambda p: p, rebuild_size=4)


@pytest.fixture(params=["linear", "kdtree"])
def nn(request):
    return _linear() if request.param == "linear" else _kdtree()


def test_nearest_r_sorted_by_distance(nn):
    points = [np.array([x, 0.0]) for x in (0.5, 0.1, 0.3, 0.9)]
    for p in points:
        nn.add(p)

    found = nn.nearest_r(np.array([0.0, 0.0]), 0.6)
    assert [float(p[0]) for p in found] == [0.1, 0.3, 0.5]


def test_nearest_r_ties_keep_insertion_order(nn):
    a = np.array([1.0, 0.0])
    b = np.array([-1.0, 0.0])
    c = np.array([0.0, 1.0])
    for p in (a, b, c):
        nn.add(p)

    found = nn.nearest_r(np.array([0.0, 0.0]), 1.0)
    assert [id(p) for p in found] == [id(a), id(b), id(c)]


def test_nearest(nn):
    assert nn.nearest(np.array([0.0, 0.0])) is None
    for x in (0.5, 0.2, 0.8):
        nn.add(np.array([x, x]))
    assert np.allclose(nn.nearest(np.array([0.25, 0.25])), [0.2, 0.2])


def test_clear(nn):
    nn.add(np.array([0.0, 0.0]))
    nn.clear()
    nn.clear()
    assert nn.size() == 0
    assert nn.nearest_r(np.array([0.0, 0.0]), 10.0) == []


def test_kdtree_matches_linear(rng):
    linear = _linear()
    kdtree = _kdtree()
    points = rng.random((200, 3))
    for p in points:
        linear.add(p)
        kdtree.add(p)

    for q in rng.random((25, 3)):
        expected = [id(p) for p in linear.nearest_r(q, 0.25)]
        assert [id(p) for p in kdtree.nearest_r(q, 0.25)] == expected
    assert kdtree.size() == linear.size() == 200


def test_kdtree_keeps_its_own_coordinates():
    kdtree = _kdtree()
    points = [np.array([0.1 * i, 0.0]) for i in range(10)]
    for p in points:
        kdtree.add(p)

    # mutate one built and one pending item after insertion
    points[0][:] = 5.0
    points[9][:] = 5.0

    found = kdtree.nearest_r(np.array([0.0, 0.0]), 0.05)
    assert [id(p) for p in found] == [id(points[0])]
    found = kdtree.nearest_r(np.array([0.9, 0.0]), 0.05)
    assert [id(p) for p in found] == [id(points[9])]
