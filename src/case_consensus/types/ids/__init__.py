from .generate import case_id, fingerprint

__all__ = ["case_id", "fingerprint"]
