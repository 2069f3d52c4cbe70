"""Subject validation against schema trees."""

from .validating_visitor import ValidatingVisitor, json_type_name
from .validator import Validator

__all__ = ["ValidatingVisitor", "Validator", "json_type_name"]
