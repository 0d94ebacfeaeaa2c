"""
Release gate sample showing how a deploy pipeline runs blazelint per plan.
"""

from .demo import PLAN_DIR, bundled_plans, gate_release, lint_bundled_plan, releasable, run_demo

__all__ = ["PLAN_DIR", "bundled_plans", "gate_release", "lint_bundled_plan", "releasable", "run_demo"]
