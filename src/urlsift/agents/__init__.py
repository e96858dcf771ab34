"""
urlsift Agents

- ProbeClient: keep-alive HTTP client used for reflection probes and page fetches
"""

from .probe_client import ProbeClient, ProbeResponse

__all__ = [
    'ProbeClient',
    'ProbeResponse'
]
