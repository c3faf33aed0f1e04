"""Shortest paths and minimum spanning trees on weighted graphs."""