"""Full Stack Java Blueprint engine.

Deterministically turns a project name, domain focus, complexity tier, and
feature selection into a Spring Boot + Next.js project blueprint.
"""

__version__ = "0.1.0"
