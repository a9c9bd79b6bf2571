"""Staging root resolution."""

from buildtask.staging.resolver import StagingDirectoryResolver, dump_environment

__all__ = ["StagingDirectoryResolver", "dump_environment"]
