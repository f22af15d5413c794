"""Run, check and track progress through a course of small exercises."""

__version__ = "5.5.1"