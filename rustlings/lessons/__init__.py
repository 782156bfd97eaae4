"""Solved forms of the exercises' logic: errors, iterators, collections, traits and more."""