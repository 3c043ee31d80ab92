"""Triggers da plataforma (instalação, ação de moderação, upgrade)."""
