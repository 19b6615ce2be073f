"""Rating models shared by restaurants, dishes and delivery partners."""

from pydantic import BaseModel, Field

MIN_STARS = 1
MAX_STARS = 5


def validate_stars(stars: int) -> int:
    """Validate a star score.

    Raises:
        ValueError: If stars is not an integer between 1 and 5
    """
    if isinstance(stars, bool) or not isinstance(stars, int):
        raise ValueError(f"stars must be an integer, got {stars!r}")
    if not MIN_STARS <= stars <= MAX_STARS:
        raise ValueError(f"stars must be between {MIN_STARS} and {MAX_STARS}, got {stars}")
    return stars


class RunningRating(BaseModel):
    """Incremental mean of integer star votes.

    A count of zero means nothing has been rated yet.
    """

    average: float = Field(default=0.0, description="Current average score", ge=0, le=MAX_STARS)
    count: int = Field(default=0, description="Number of votes folded in", ge=0)

    def add(self, score: int) -> float:
        """Fold one score into the average.

        Args:
            score: Star score between 1 and 5

        Returns:
            float: The new average
        """
        validate_stars(score)
        self.average = (self.average * self.count + score) / (self.count + 1)
        self.count += 1
        return self.average

    @property
    def is_rated(self) -> bool:
        """Whether at least one vote has been recorded."""
        return self.count > 0

    def display(self) -> str:
        """Format the average for display, 'N/A' when unrated."""
        if not self.is_rated:
            return "N/A"
        return f"{self.average:.1f}"
