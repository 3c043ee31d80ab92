"""Normalizers — conversão de payloads externos para registros internos.

Estrutura:
- reddit/: triggers de ModAction e entradas do mod log

Nenhum componente após esta fronteira vê payload cru da plataforma.
"""

from .reddit import normalize_mod_log_entry, normalize_trigger_event

__all__ = [
    "normalize_mod_log_entry",
    "normalize_trigger_event",
]
