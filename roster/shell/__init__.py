"""Shell Layer: interactive menu over stdin/stdout.

Invariants:
    - The shell owns all terminal IO; core/ never reads input or prints
    - Every RosterError is rendered as "ERROR: <message>" and the loop continues
"""
