from app.repositories.cutoff.cutoff import CutoffRepository

__all__ = ["CutoffRepository"]
