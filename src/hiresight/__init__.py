"""HireSight: job-fit analysis, interview review and resume rewriting."""

__version__ = "0.1.0"
