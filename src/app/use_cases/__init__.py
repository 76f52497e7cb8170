"""Casos de uso que coordenam várias operações do núcleo."""
