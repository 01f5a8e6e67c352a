"""Reference interpreter for the instruction subset the code generator emits."""


def _idiv(a, b):
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def run_asm(text):
    """Execute a generated program and return the value left in rax at ``ret``."""
    stack = []
    regs = {"rax": 0, "rdi": 0, "rdx": 0}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(".") or line.endswith(":"):
            continue
        op, _, rest = line.partition(" ")
        operands = [part.strip() for part in rest.split(",")] if rest else []
        if op == "push":
            src = operands[0]
            stack.append(regs[src] if src in regs else int(src))
        elif op == "mov":
            dst, src = operands
            regs[dst] = regs[src] if src in regs else int(src)
        elif op == "pop":
            regs[operands[0]] = stack.pop()
        elif op == "add":
            regs["rax"] += regs["rdi"]
        elif op == "sub":
            regs["rax"] -= regs["rdi"]
        elif op == "imul":
            regs["rax"] *= regs["rdi"]
        elif op == "cqo":
            regs["rdx"] = -1 if regs["rax"] < 0 else 0
        elif op == "idiv":
            regs["rax"] = _idiv(regs["rax"], regs[operands[0]])
        elif op == "ret":
            assert not stack, f"stack not empty at ret: {stack}"
            return regs["rax"]
        else:
            raise ValueError(f"unknown instruction {line!r}")
    raise AssertionError("program fell off the end without ret")
