"""
Couche adaptateurs (interfaces utilisateur).

Sous-packages :
- cli/ : Interface ligne de commande interactive (Typer + Rich)

Chaque adaptateur dépend de core/ et services/ mais core/ ne dépend jamais des adaptateurs.
"""
