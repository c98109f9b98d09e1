"""KubeDeck - terminal dashboard for browsing a Kubernetes cluster."""

__version__ = "0.1.0"

__all__ = ["__version__"]
