"""Leitura do log de bans."""
