"""API — camada de borda e adapters externos.

Responsabilidades:
- Receber triggers da plataforma (HTTP)
- Normalizar eventos crus para registros do domínio
- Falar com serviços externos (Discord, Giphy, mod log do Reddit)

Subpastas:
- connectors/: clientes HTTP por serviço externo
- normalizers/: conversão de payloads externos → registros internos
- routes/: endpoints HTTP (triggers, health, leitura)

NÃO PODE conter: regras de gravação, orquestração de use cases.
"""
