"""Machine-readable output for scripted use of the CLI."""

from nutrivec.agent.response import CommandResponse, error_response, success_response

__all__ = ["CommandResponse", "error_response", "success_response"]
