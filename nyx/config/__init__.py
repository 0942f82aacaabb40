"""Namespace for editor configuration; it holds no modules yet."""