"""A module that re-exports the runtime, generated code can use it as its root namespace."""

from tagcodec import *  # noqa: F401,F403
