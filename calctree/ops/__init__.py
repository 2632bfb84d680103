# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tree operations built on `ExpressionOperation` double dispatch.

  evaluate  reversed pre-order stack evaluation to a float
  bind      in-place variable assignment
  render    expression text for a tree
"""

from .base import ExpressionOperation
from .bind import BindOperation, bind, bind_all, variable_names
from .evaluate import ValueOperation, evaluate
from .render import RenderOperation, render

__all__ = [
	"BindOperation",
	"ExpressionOperation",
	"RenderOperation",
	"ValueOperation",
	"bind",
	"bind_all",
	"evaluate",
	"render",
	"variable_names",
]
