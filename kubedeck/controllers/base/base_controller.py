"""Base controller with async worker-friendly patterns for KubeDeck.

Controllers are awaited from Textual workers and background tasks so the UI
stays responsive while kubectl runs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class BaseController(ABC):
    """Base controller class for cluster-facing data sources."""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...
