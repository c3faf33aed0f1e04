"""Assorted algorithms: Towers of Hanoi and convex hulls."""