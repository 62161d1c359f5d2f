import math
from collections.abc import Sequence

from path_shortcut.app.protocols import PathGenerator
from path_shortcut.domain.entities.geography import JointVector
from path_shortcut.domain.entities.paths import GeneratedPath
from path_shortcut.utils.angles import shortest_angle_diff
from path_shortcut.utils.interpolation import interpolate_path


def joint_step_cost(a: JointVector, b: JointVector) -> float:
    """Euclidean norm of the per-joint shortest angle differences."""
    return math.sqrt(sum(shortest_angle_diff(y, x) ** 2 for x, y in zip(a, b)))


class JointInterpolationGenerator(PathGenerator):
    """
    Connect two joint configurations by dense interpolation under joint limits.
    Cost is the summed joint_step_cost over the interpolated waypoints.
    """

    def __init__(
        self,
        min_limits: Sequence[float],
        max_limits: Sequence[float],
        increments: Sequence[float],
        continuous_joints: Sequence[bool] | None = None,
        eps: float = 1e-6,
    ):
        self.min_limits, self.max_limits = list(min_limits), list(max_limits)
        self.increments = list(increments)
        self.continuous_joints = None if continuous_joints is None else list(continuous_joints)
        self.eps = eps

    def generate_path(self, a, b):
        pts = interpolate_path(
            a,
            b,
            self.min_limits,
            self.max_limits,
            self.increments,
            self.continuous_joints,
            self.eps,
        )
        if pts is None:
            return None
        # report the caller's endpoints, not their normalized copies
        pts[0], pts[-1] = tuple(a), tuple(b)
        cost = sum(joint_step_cost(p, q) for p, q in zip(pts, pts[1:]))
        return GeneratedPath(pts, cost)
