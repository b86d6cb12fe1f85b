"""Responder-rate analysis for zinc-supplementation seizure outcome studies."""

__version__ = "0.1.0"
