"""Unit tests for AggressiveConnectedScore."""

from wifi_score.services.scoring.aggressive import AggressiveConnectedScore


class TestAggressiveConnectedScore:
    """Score = (rssi - sufficient) * 2 + transition score."""

    def test_transition_score_follows_max_score(self, scoring_params, clock):
        scorer = AggressiveConnectedScore(scoring_params, clock, max_score=60)

        assert scorer.WIFI_TRANSITION_SCORE == 50

    def test_score_on_24ghz(self, scoring_params, clock, make_measurement):
        scorer = AggressiveConnectedScore(scoring_params, clock)
        scorer.update_using_link_measurement(
            make_measurement(rssi=-60, frequency=2412), clock.now_ms
        )

        # sufficient rssi on 2.4 GHz is -73
        assert scorer.generate_score() == 76

    def test_score_on_5ghz(self, scoring_params, clock, make_measurement):
        scorer = AggressiveConnectedScore(scoring_params, clock)
        scorer.update_using_link_measurement(
            make_measurement(rssi=-60, frequency=5180), clock.now_ms
        )

        # sufficient rssi on 5 GHz is -70
        assert scorer.generate_score() == 70

    def test_weak_signal_scores_below_transition(self, scoring_params, clock, make_measurement):
        scorer = AggressiveConnectedScore(scoring_params, clock)
        scorer.update_using_link_measurement(
            make_measurement(rssi=-80, frequency=5180), clock.now_ms
        )

        assert scorer.generate_score() == 30

    def test_update_using_rssi_keeps_frequency(self, scoring_params, clock, make_measurement):
        scorer = AggressiveConnectedScore(scoring_params, clock)
        scorer.update_using_link_measurement(
            make_measurement(rssi=-60, frequency=2412), clock.now_ms
        )
        scorer.update_using_rssi(-73, clock.now_ms, 2.0)

        assert scorer.generate_score() == 50

    def test_reset_returns_to_5ghz_band(self, scoring_params, clock, make_measurement):
        scorer = AggressiveConnectedScore(scoring_params, clock)
        scorer.update_using_link_measurement(
            make_measurement(rssi=-60, frequency=2412), clock.now_ms
        )

        scorer.reset()

        assert scorer.frequency_mhz == 5000
        assert scorer.generate_score() == 70
