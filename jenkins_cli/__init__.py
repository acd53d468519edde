"""
Jenkins CLI module.

Command-line entry point that fetches the configured jobs, prints them and
records the run in the snapshot store.
"""
