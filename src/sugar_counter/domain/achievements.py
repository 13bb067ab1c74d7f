"""Achievement catalog and requirement variants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AchievementStats:
    """Statistics every requirement is evaluated against."""

    longest_streak: int
    total_days_tracked: int
    days_under_goal: int
    perfect_week: bool


@dataclass(frozen=True)
class StreakRequirement:
    days: int

    def is_met(self, stats: AchievementStats) -> bool:
        return stats.longest_streak >= self.days


@dataclass(frozen=True)
class TotalDaysRequirement:
    days: int

    def is_met(self, stats: AchievementStats) -> bool:
        return stats.total_days_tracked >= self.days


@dataclass(frozen=True)
class DaysUnderGoalRequirement:
    days: int

    def is_met(self, stats: AchievementStats) -> bool:
        return stats.days_under_goal >= self.days


@dataclass(frozen=True)
class PerfectWeekRequirement:
    def is_met(self, stats: AchievementStats) -> bool:
        return stats.perfect_week


Requirement = (
    StreakRequirement
    | TotalDaysRequirement
    | DaysUnderGoalRequirement
    | PerfectWeekRequirement
)


@dataclass(frozen=True)
class Achievement:
    """A badge the user can unlock."""

    title: str
    description: str
    icon_hint: str
    requirement: Requirement


@dataclass(frozen=True)
class AchievementStatus:
    """An achievement together with its derived unlock state."""

    achievement: Achievement
    unlocked: bool


ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement(
        title="First Step",
        description="Track your first day",
        icon_hint="figure.walk",
        requirement=TotalDaysRequirement(1),
    ),
    Achievement(
        title="Week Warrior",
        description="Track for 7 days",
        icon_hint="calendar.badge.clock",
        requirement=TotalDaysRequirement(7),
    ),
    Achievement(
        title="Monthly Master",
        description="Track for 30 days",
        icon_hint="calendar",
        requirement=TotalDaysRequirement(30),
    ),
    Achievement(
        title="On Fire",
        description="3-day streak under goal",
        icon_hint="flame.fill",
        requirement=StreakRequirement(3),
    ),
    Achievement(
        title="Unstoppable",
        description="7-day streak under goal",
        icon_hint="bolt.fill",
        requirement=StreakRequirement(7),
    ),
    Achievement(
        title="Sugar Master",
        description="14-day streak under goal",
        icon_hint="crown.fill",
        requirement=StreakRequirement(14),
    ),
    Achievement(
        title="Perfect Week",
        description="7 consecutive days under goal",
        icon_hint="star.circle.fill",
        requirement=PerfectWeekRequirement(),
    ),
    Achievement(
        title="Goal Getter",
        description="10 days under goal",
        icon_hint="target",
        requirement=DaysUnderGoalRequirement(10),
    ),
    Achievement(
        title="Sugar Champion",
        description="30 days under goal",
        icon_hint="trophy.fill",
        requirement=DaysUnderGoalRequirement(30),
    ),
)
