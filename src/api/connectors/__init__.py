"""Connectors — adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente httpx compartilhado (timeout, headers, erros)
- discord/: entrega de notificações via webhook
- giphy/: lookup de GIF aleatório para thumbnail
- reddit/: paginação do mod log

Cada connector isola suas falhas; nenhum deixa exceção de rede vazar
para além do contrato documentado.
"""

__all__: list[str] = []
