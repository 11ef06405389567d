# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import enum


class Slot(enum.Enum):
    """Particle sub-states targeted by initialization"""

    CANDIDATE_SOLUTION = "candidate_solution"
    BEST_POSITION = "best_position"
    VELOCITY = "velocity"


# ordered names of the control parameters carried by a particle
CONTROL_PARAMETERS = ("inertia", "social_acceleration", "cognitive_acceleration", "vmax")

# keys of the mapping returned by control parameter velocity computations
VELOCITY_KEYS = {
    "inertia": "InertiaVelocity",
    "social_acceleration": "SocialAccelerationVelocity",
    "cognitive_acceleration": "CognitiveAccelerationVelocity",
    "vmax": "VmaxVelocity",
}
