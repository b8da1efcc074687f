"""Setup sequencing: the orchestrator and its step status rendering."""

from .orchestrator import STEPS, SetupProgress, repository_url, run_setup

__all__ = ["STEPS", "SetupProgress", "repository_url", "run_setup"]
