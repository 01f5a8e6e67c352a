from .parser import NodeKind, Num

PROLOGUE = [
    ".intel_syntax noprefix",
    ".global main",
    "main:",
]

EPILOGUE = [
    "    pop rax",
    "    ret",
]

IMM32_MIN = -2**31
IMM32_MAX = 2**31 - 1

OPS = {
    NodeKind.ADD: ["    add rax, rdi"],
    NodeKind.SUB: ["    sub rax, rdi"],
    NodeKind.MUL: ["    imul rax, rdi"],
    # signed, truncating; division by zero faults at run time
    NodeKind.DIV: ["    cqo", "    idiv rdi"],
}


def gen(node, lines=None):
    """Emit stack-machine code for ``node``: each subtree leaves one value pushed."""
    if lines is None:
        lines = []

    if isinstance(node, Num):
        if IMM32_MIN <= node.value <= IMM32_MAX:
            lines.append(f"    push {node.value}")
        else:
            # push only takes a sign-extended 32-bit immediate
            lines.append(f"    mov rax, {node.value}")
            lines.append("    push rax")
        return lines

    gen(node.left, lines)
    gen(node.right, lines)

    lines.append("    pop rdi")
    lines.append("    pop rax")
    lines.extend(OPS[node.kind])
    lines.append("    push rax")
    return lines


def generate(node):
    lines = PROLOGUE + gen(node) + EPILOGUE
    return "\n".join(lines) + "\n"


def stack_effect(lines):
    depth = 0
    for line in lines:
        op = line.split(maxsplit=1)[0] if line.strip() else ""
        if op == "push":
            depth += 1
        elif op == "pop":
            depth -= 1
    return depth
