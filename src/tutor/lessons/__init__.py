"""
Lesson bodies.

Each module exposes a zero-argument ``run()`` that prints a short,
self-contained demonstration of one language feature. Lessons share no
state and never call one another; the registry in
``tutor.framework.registry`` decides their numbers, slugs and titles.
"""
