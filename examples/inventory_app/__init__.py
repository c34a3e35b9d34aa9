from .demo import ensure_schema, render_schema, run_demo  # noqa: F401

__all__ = ["ensure_schema", "render_schema", "run_demo"]
