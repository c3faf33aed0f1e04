"""Rotation and Vigenère ciphers, and Morse code."""