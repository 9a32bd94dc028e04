"""{{NAME}}: {{DESC}}"""

__version__ = "{{VERSION}}"
