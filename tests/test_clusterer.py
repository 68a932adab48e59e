"""
Tests for the bounded K-Means clusterer.
"""

import logging
from collections import Counter

import numpy as np
import pytest

from dominant_color.kmeans import (
    Cluster,
    ClusteringError,
    DegenerateInputError,
    EmptyInputError,
    KMeansClusterer,
    KMeansConfig,
    Point
)


def quantized_points(n, seed=0):
    """Random colors on the 8-bit grid, like samples decoded from an image."""
    rng = np.random.RandomState(seed)
    values = rng.randint(0, 256, size=(n, 3)) / 255.0
    return [Point(*row) for row in values.tolist()]


def two_blobs():
    dark = [Point(0.0, 0, 0), Point(0.01, 0, 0), Point(0.02, 0, 0)]
    light = [Point(0.98, 1, 1), Point(0.99, 1, 1), Point(1.0, 1, 1)]
    return dark + light


def test_worked_example():
    points = [Point(0, 0, 0), Point(0, 0, 0), Point(1, 1, 1)]

    result = KMeansClusterer(KMeansConfig(random_state=0)).fit(points, 2)

    by_center = {cluster.center: cluster for cluster in result.clusters}
    assert set(by_center) == {Point(0, 0, 0), Point(1, 1, 1)}
    assert by_center[Point(0, 0, 0)].members == [Point(0, 0, 0), Point(0, 0, 0)]
    assert by_center[Point(1, 1, 1)].members == [Point(1, 1, 1)]
    assert result.converged
    assert result.n_iter == 1


@pytest.mark.parametrize("k", [1, 2, 3, 5, 8])
def test_returns_k_clusters_partitioning_input(k):
    points = quantized_points(300, seed=k)

    clusters = KMeansClusterer(random_state=123).cluster(points, k)

    assert len(clusters) == k
    members = [p for cluster in clusters for p in cluster.members]
    assert Counter(members) == Counter(points)


@pytest.mark.parametrize("seed", range(5))
def test_centers_are_input_points(seed):
    points = quantized_points(200, seed=seed)
    inputs = set(points)

    clusters = KMeansClusterer(random_state=seed).cluster(points, 4)

    assert all(cluster.center in inputs for cluster in clusters)
    assert len({cluster.center for cluster in clusters}) == 4


def test_single_cluster_center_is_nearest_to_mean():
    points = quantized_points(100)
    mean = sum(points, Point.zero()) / len(points)
    expected = min(points, key=mean.distance_squared)

    clusters = KMeansClusterer(random_state=1).cluster(points, 1)

    assert len(clusters) == 1
    assert len(clusters[0]) == len(points)
    assert clusters[0].center == expected


def test_k_equal_to_distinct_count_groups_duplicates():
    values = [Point(1, 0, 0), Point(0, 1, 0), Point(0, 0, 1), Point(0.5, 0.5, 0.5)]
    points = values + [Point(1, 0, 0), Point(0, 0, 1), Point(1, 0, 0)]

    clusters = KMeansClusterer(random_state=3).cluster(points, len(values))

    counts = Counter(points)
    assert len(clusters) == len(values)
    for cluster in clusters:
        assert all(member == cluster.center for member in cluster.members)
        assert len(cluster) == counts[cluster.center]


def test_identical_points_single_cluster():
    points = [Point(0.2, 0.2, 0.2)] * 10

    result = KMeansClusterer().fit(points, 1)

    assert result.clusters[0].center == Point(0.2, 0.2, 0.2)
    assert len(result.clusters[0]) == 10
    assert result.converged


def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        KMeansClusterer().cluster([], 1)


def test_too_few_distinct_values_raises():
    points = [Point(0, 0, 0)] * 5 + [Point(1, 1, 1)]

    with pytest.raises(DegenerateInputError) as exc_info:
        KMeansClusterer().cluster(points, 3)

    assert exc_info.value.k == 3
    assert exc_info.value.n_distinct == 2


def test_clustering_errors_are_value_errors():
    assert issubclass(EmptyInputError, ClusteringError)
    assert issubclass(DegenerateInputError, ClusteringError)
    assert issubclass(ClusteringError, ValueError)


def test_invalid_k_raises():
    with pytest.raises(ValueError):
        KMeansClusterer().cluster([Point(0, 0, 0)], 0)


def test_default_k_from_config():
    points = quantized_points(50)
    clusters = KMeansClusterer(KMeansConfig(n_clusters=2, random_state=0)).cluster(points)
    assert len(clusters) == 2


def test_same_seed_is_deterministic():
    points = quantized_points(400, seed=11)

    first = KMeansClusterer(random_state=7).fit(points, 5)
    second = KMeansClusterer(random_state=7).fit(points, 5)

    assert [c.center for c in first.clusters] == [c.center for c in second.clusters]
    assert [c.members for c in first.clusters] == [c.members for c in second.clusters]
    assert first.n_iter == second.n_iter


def test_accepts_random_state_instance():
    points = quantized_points(50)
    rng = np.random.RandomState(5)

    clusters = KMeansClusterer(random_state=rng).cluster(points, 3)

    assert len(clusters) == 3


def test_iteration_cap():
    points = quantized_points(500, seed=2)

    result = KMeansClusterer(KMeansConfig(max_iter=1, tol=0.0, random_state=0)).fit(points, 6)

    assert result.n_iter == 1
    assert len(result.clusters) == 6


def test_never_exceeds_default_cap():
    points = quantized_points(1000, seed=4)

    result = KMeansClusterer(random_state=0).fit(points, 8)

    assert 1 <= result.n_iter <= 10


@pytest.mark.parametrize("seed", range(10))
def test_converged_state_is_stable(seed):
    points = two_blobs()
    clusterer = KMeansClusterer(random_state=seed)

    result = clusterer.fit(points, 2)
    centers = [c.center for c in result.clusters]
    members = [list(c.members) for c in result.clusters]

    assert result.converged
    assert set(centers) == {Point(0.01, 0, 0), Point(0.99, 1, 1)}

    # One more round on the converged state changes nothing
    assert clusterer.step(points, result.clusters) == 0.0
    assert [c.center for c in result.clusters] == centers
    assert [c.members for c in result.clusters] == members


def test_single_cluster_converged_state_is_stable():
    points = quantized_points(80, seed=9)
    clusterer = KMeansClusterer(random_state=2)

    result = clusterer.fit(points, 1)
    center = result.clusters[0].center

    assert result.converged
    assert clusterer.step(points, result.clusters) == 0.0
    assert result.clusters[0].center == center


def test_ranked_orders_by_population():
    points = [Point(0, 0, 0)] * 3 + [Point(1, 1, 1)] * 5 + [Point(0, 1, 0)]

    result = KMeansClusterer(random_state=0).fit(points, 3)

    assert [len(c) for c in result.ranked()] == [5, 3, 1]
    assert result.ranked()[0].center == Point(1, 1, 1)


def test_logs_convergence(caplog):
    caplog.set_level(logging.DEBUG, logger="dominant_color.kmeans.clusterer")

    KMeansClusterer(random_state=0).fit([Point(0, 0, 0), Point(1, 1, 1)], 2)

    assert "Converged after 1 iteration" in caplog.text


@pytest.mark.parametrize("kwargs", [
    {"n_clusters": 0},
    {"max_iter": 0},
    {"tol": -0.1},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        KMeansConfig(**kwargs)


def test_assignment_tie_goes_to_earlier_cluster():
    points = [Point(0.5, 0.5, 0.5)]
    clusterer = KMeansClusterer()

    clusters = [Cluster(Point(0, 0, 0)), Cluster(Point(1, 1, 1))]
    clusterer.step(points, clusters)
    assert clusters[0].members == points
    assert clusters[1].members == []

    swapped = [Cluster(Point(1, 1, 1)), Cluster(Point(0, 0, 0))]
    clusterer.step(points, swapped)
    assert swapped[0].members == points
    assert swapped[1].members == []
