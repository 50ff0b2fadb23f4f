"""Simple bound constraints for gradient-based optimization.

Projection of variables and directions onto a box, step limits for the line
search and selection of the free variables::

    from simplebounds import project_variables, step_limits
"""

from .bounds import Bound, BoundKind, check_bounds, fastclamp, fastmax, fastmin, lower_bound, upper_bound
from .box import BoxConstraints
from .buffers import IndexBuffer
from .direction import project_direction, project_gradient
from .errors import BoundsError, InvalidBoundsError, InvalidOrientationError, ShapeMismatchError
from .free import free_variables, get_free_variables
from .orientation import BACKWARD, FORWARD, Orientation, as_orientation, orientation_sign
from .project import project_variables
from .step import step_limits

__version__ = "0.1.0"

__all__ = [
    "BACKWARD",
    "FORWARD",
    "Bound",
    "BoundKind",
    "BoundsError",
    "BoxConstraints",
    "IndexBuffer",
    "InvalidBoundsError",
    "InvalidOrientationError",
    "Orientation",
    "ShapeMismatchError",
    "as_orientation",
    "check_bounds",
    "fastclamp",
    "fastmax",
    "fastmin",
    "free_variables",
    "get_free_variables",
    "lower_bound",
    "orientation_sign",
    "project_direction",
    "project_gradient",
    "project_variables",
    "step_limits",
    "upper_bound",
]
