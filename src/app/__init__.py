"""App — coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: registros do log de moderação e config de instalação
- use_cases/: casos de uso dos triggers (backfill, ação ao vivo)
- services/: serviços de aplicação (composição da notificação)
- infra/: implementações concretas de IO (stores, settings)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; utils apoia.
"""
