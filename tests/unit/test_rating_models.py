"""Unit tests for running ratings."""

import pytest

from foodmate.models.rating_models import RunningRating, validate_stars


@pytest.mark.unit
class TestRunningRating:
    """Test suite for RunningRating."""

    def test_add_applies_incremental_mean(self) -> None:
        """Test that one fold equals (A*N+S)/(N+1)."""
        rating = RunningRating(average=4.5, count=1)

        new_average = rating.add(3)

        assert new_average == (4.5 * 1 + 3) / (1 + 1)
        assert rating.average == 3.75
        assert rating.count == 2

    def test_sequence_from_empty(self) -> None:
        """Test folding [5, 3, 4] from an unrated start gives 4.0."""
        rating = RunningRating()

        for score in [5, 3, 4]:
            rating.add(score)

        assert rating.average == 4.0
        assert rating.count == 3

    def test_order_of_submissions_is_weighted_equally(self) -> None:
        """Test that different submission orders reach the same mean."""
        forward = RunningRating()
        backward = RunningRating()

        for score in [1, 2, 5, 4]:
            forward.add(score)
        for score in [4, 5, 2, 1]:
            backward.add(score)

        assert forward.average == pytest.approx(backward.average)
        assert forward.average == pytest.approx(3.0)

    @pytest.mark.parametrize("score", [0, 6, -1])
    def test_add_rejects_out_of_range_scores(self, score: int) -> None:
        """Test that scores outside 1-5 raise and leave the rating unchanged."""
        rating = RunningRating(average=5.0, count=1)

        with pytest.raises(ValueError):
            rating.add(score)

        assert rating.average == 5.0
        assert rating.count == 1

    def test_display(self) -> None:
        """Test display text for unrated and rated values."""
        rating = RunningRating()
        assert rating.display() == "N/A"

        rating.add(4)
        assert rating.display() == "4.0"


@pytest.mark.unit
class TestValidateStars:
    """Test suite for validate_stars."""

    def test_accepts_valid_scores(self) -> None:
        """Test that 1 through 5 are accepted."""
        assert [validate_stars(s) for s in range(1, 6)] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("value", [True, 3.5, "4"])
    def test_rejects_non_integers(self, value: object) -> None:
        """Test that booleans, floats and strings are rejected."""
        with pytest.raises(ValueError):
            validate_stars(value)  # type: ignore[arg-type]
