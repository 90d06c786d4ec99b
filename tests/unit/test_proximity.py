"""Unit tests for the proximity classifier."""

import pytest

from imodelexplainer.model.geometry_primitives import Point
from imodelexplainer.model.nodes import RevealZoneId
from imodelexplainer.model.proximity import ProximityClassifier, distance


@pytest.fixture
def classifier(config) -> ProximityClassifier:
    return ProximityClassifier(config)


def test_distance_is_euclidean() -> None:
    assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert distance(Point(1, 1), Point(1, 1)) == 0.0


class TestLockZone:
    """Tests for commit / unlock / near thresholds."""

    def test_commit_boundary_is_inclusive(self, classifier, viewport, anchor, config) -> None:
        on_boundary = Point(anchor.x + config.commit_radius, anchor.y)
        just_outside = Point(anchor.x + config.commit_radius + 1e-6, anchor.y)

        assert classifier.is_commit(on_boundary, viewport)
        assert not classifier.is_commit(just_outside, viewport)

    def test_unlock_by_distance(self, classifier, viewport, anchor, config) -> None:
        assert classifier.is_unlock(Point(anchor.x + config.unlock_radius + 1, anchor.y), viewport)
        assert not classifier.is_unlock(Point(anchor.x + config.unlock_radius - 1, anchor.y), viewport)

    def test_unlock_by_horizontal_escape(self, classifier, viewport, anchor, config) -> None:
        escaped = Point(anchor.x - config.unlock_escape_dx - 1, anchor.y)
        inside = Point(anchor.x - config.unlock_escape_dx + 1, anchor.y)

        assert escaped.distance_to(anchor) < config.unlock_radius
        assert classifier.is_unlock(escaped, viewport)
        assert not classifier.is_unlock(inside, viewport)

    def test_near_radius_depends_on_lock(self, classifier, viewport, anchor) -> None:
        # 1.8 L = 108 unlocked, 2.0 L = 120 locked
        point = Point(anchor.x + 115, anchor.y)
        assert not classifier.is_near(point, viewport, locked=False)
        assert classifier.is_near(point, viewport, locked=True)

    def test_threshold_ordering(self, config) -> None:
        assert config.commit_radius < config.near_radius(False) < config.capture_radius < config.unlock_radius

    def test_glow_intensity(self, classifier, viewport, anchor) -> None:
        assert classifier.glow_intensity(anchor, viewport) == pytest.approx(1.0)
        assert classifier.glow_intensity(Point(anchor.x + 500, anchor.y), viewport) == 0.0
        assert classifier.glow_intensity(None, viewport) == 0.0


class TestRevealZones:
    """Tests for reveal-zone detection and hysteresis."""

    def test_anchors_lie_between_lock_and_slots(self, classifier, viewport) -> None:
        anchors = classifier.reveal_anchors(viewport)

        assert list(anchors) == list(RevealZoneId)
        assert anchors[RevealZoneId.UPPER] == Point(270.0, 305.0)
        assert anchors[RevealZoneId.FAR] == Point(330.0, 350.0)
        assert anchors[RevealZoneId.LOWER] == Point(270.0, 395.0)

    def test_zones_stay_inside_unlock_radius(self, classifier, viewport) -> None:
        # Releasing the lead on a reveal zone must snap it back, not unlock
        for center in classifier.reveal_anchors(viewport).values():
            assert not classifier.is_unlock(center, viewport)

    def test_detection(self, classifier, viewport) -> None:
        assert classifier.reveal_zone_at(Point(270, 305), viewport) is RevealZoneId.UPPER
        assert classifier.reveal_zone_at(Point(270, 336), viewport) is RevealZoneId.UPPER
        assert classifier.reveal_zone_at(Point(270, 350), viewport) is None
        assert classifier.reveal_zone_at(Point(335, 352), viewport) is RevealZoneId.FAR

    def test_hysteresis_keeps_zone_until_leave_radius(self, classifier, viewport) -> None:
        between = Point(270, 265)   # 40 from UPPER: outside 32, inside 48
        beyond = Point(270, 255)    # 50 from UPPER

        assert classifier.reveal_zone_at(between, viewport) is None
        assert classifier.next_reveal(between, viewport, RevealZoneId.UPPER) is RevealZoneId.UPPER
        assert classifier.next_reveal(between, viewport, None) is None
        assert classifier.next_reveal(beyond, viewport, RevealZoneId.UPPER) is None

    def test_entering_another_zone_switches(self, classifier, viewport) -> None:
        assert classifier.next_reveal(Point(330, 350), viewport, RevealZoneId.UPPER) is RevealZoneId.FAR
