"""
Knight path package.

Computes the shortest sequence of knight moves between two squares on an
8x8 board and persists each computed result under an operation identifier
so it can be queried later.

Modules:
    constants — Board size, knight offsets, path encoding
    errors    — Exception hierarchy shared by every layer
    squares   — Square value type and knight-move generation
    search    — Breadth-first shortest path over the knight-move graph
    records   — Persisted PathRecord model and identifier generation
    store     — JSON-file ResultStore with locked, atomic writes
    service   — Submit / retrieve operations consumed by the web layer
    config    — Environment-driven settings
"""
