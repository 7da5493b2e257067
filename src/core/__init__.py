"""
Couche domaine (core).

Contient les entités métier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, fichiers).

Sous-packages :
- entities/ : Entités métier (WatchItem, WatchItemType, WatchStatus)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
