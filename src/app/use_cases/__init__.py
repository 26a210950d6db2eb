"""Casos de uso de leitura: payload do backend -> listas exibidas pelas telas."""
