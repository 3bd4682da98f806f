# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class ProfileStats(TypedDict):
    habits_created: int  # Count of current habits
    total_completions: int  # Sum of completions over current habits


class UserProfile(TypedDict):
    name: str
    created: pendulum.DateTime
    stats: ProfileStats  # Derived, recomputed from the habit list
