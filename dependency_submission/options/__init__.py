"""Options module: marshals action inputs into the plugin task payload."""

from dependency_submission.options.marshaler import marshal, parse_dependency_spec, split_list
from dependency_submission.options.types import (
    DependencySpec,
    ResolveFailurePolicy,
    SubmissionOptions,
)

__all__ = [
    "marshal",
    "parse_dependency_spec",
    "split_list",
    "DependencySpec",
    "ResolveFailurePolicy",
    "SubmissionOptions",
]
