"""
Pydantic models for the IAM policy access calls.
"""

from typing import List, Optional

from pydantic import Field

from .base import WireModel
from .types import Int32


class GetPolicyOptions(WireModel):
    """Options controlling the detail of a returned policy."""
    requested_policy_version: Optional[Int32] = Field(
        None,
        description="Maximum policy version used to format the policy (0, 1 or 3)"
    )


class GetIamPolicyRequest(WireModel):
    """Request message for the GetIamPolicy method."""
    options: Optional[GetPolicyOptions] = Field(None, description="Options for GetIamPolicy")


class Expr(WireModel):
    """Textual expression in Common Expression Language syntax."""
    expression: Optional[str] = Field(None, description="Expression text")
    title: Optional[str] = Field(None, description="Short title for the expression")
    description: Optional[str] = Field(None, description="Longer description of the expression")
    location: Optional[str] = Field(None, description="Where the expression came from, for error reporting")


class Binding(WireModel):
    """Associates a list of members with a role."""
    role: Optional[str] = Field(None, description="Role assigned to the members, e.g. roles/viewer")
    members: Optional[List[str]] = Field(None, description="Principals granted the role")
    condition: Optional[Expr] = Field(None, description="Condition under which the binding applies")


class Policy(WireModel):
    """Access control policy attached to a resource."""
    version: Optional[Int32] = Field(None, description="Format of the policy")
    bindings: Optional[List[Binding]] = Field(None, description="Role bindings of the policy")
    etag: Optional[str] = Field(None, description="Opaque tag used for optimistic concurrency control")
