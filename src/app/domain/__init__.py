"""Modelos de domínio (projeções de leitura das telas)."""
