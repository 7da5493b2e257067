"""
Couche infrastructure.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage de la liste de suivi dans un fichier JSON

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: SQLite au lieu de JSON)
sans modifier la logique metier.
"""
