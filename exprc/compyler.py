from .parser import *

import llvmlite.ir as ir

INT = ir.IntType(64)


class LLVMCodeGen:
    def __init__(self):
        self.module = ir.Module(name="module")
        self.builder = None
        self.func = None

    def generate_code(self, node):
        if isinstance(node, BinOp):
            left = self.generate_code(node.left)
            right = self.generate_code(node.right)
            if node.kind is NodeKind.ADD:
                return self.builder.add(left, right)
            elif node.kind is NodeKind.SUB:
                return self.builder.sub(left, right)
            elif node.kind is NodeKind.MUL:
                return self.builder.mul(left, right)
            elif node.kind is NodeKind.DIV:
                return self.builder.sdiv(left, right)
        elif isinstance(node, Num):
            return ir.Constant(INT, node.value)
        raise TypeError(f'Cannot generate code for {node!r}')

    def create_main(self, ast):
        func_type = ir.FunctionType(INT, [])
        self.func = ir.Function(self.module, func_type, name="main")
        block = self.func.append_basic_block(name="entry")
        self.builder = ir.IRBuilder(block)
        self.builder.ret(self.generate_code(ast))
        return self.module
