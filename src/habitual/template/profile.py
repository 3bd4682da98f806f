# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from habitual.model.profile import UserProfile
from habitual.time import now_local


def get_profile_template(
    name: str = "User", created: Optional[pendulum.DateTime] = None
) -> UserProfile:
    return {
        "name": name,
        "created": created if created is not None else now_local(),
        "stats": {
            "habits_created": 0,
            "total_completions": 0,
        },
    }
