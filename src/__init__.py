"""
Watchlist - Suivi de visionnage personnel (films et séries).

Ce package fournit un CLI interactif pour ajouter des éléments à une liste
de suivi, enregistrer la progression par épisode, marquer un élément comme
terminé et le supprimer. La liste est conservée dans un fichier JSON local.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports)
- services/ : Couche application (cas d'utilisation)
- infrastructure/ : Persistance (fichier JSON)
- adapters/ : Interface CLI (Typer + Rich)
"""
