"""Kickoff: stack validation, recommendation and generation planning.

Given a resolved ``ProjectConfig`` (usually from a preset), Kickoff checks it
against the constraint rules, ranks catalog options for open choices, and
merges the template fragments the configuration needs into a single plan for
a file writer.

Usage::

    from kickoff.project import config_from_preset
    from kickoff.generator import prepare_generation

    outcome = prepare_generation(config_from_preset("saas-starter", "my-app"))
"""

__version__ = "0.1.0"
