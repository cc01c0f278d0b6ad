"""folio.tools package

Developer utilities (catalog validation and filtering).

Keep this package's __init__ free of eager imports so modules run cleanly via
`python -m folio.tools.<name>`.
"""

__all__: list[str] = []
