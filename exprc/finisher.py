from ctypes import CFUNCTYPE, c_int64

import llvmlite.binding as llvm

llvm.initialize_native_target()
llvm.initialize_native_asmprinter()


def _target_machine():
    target = llvm.Target.from_default_triple()
    return target.create_target_machine()


def _parse(codegen_module):
    mod = llvm.parse_assembly(str(codegen_module))
    mod.verify()
    return mod


def module_to_asm(codegen_module):
    """Native assembly for the module, for the host target."""
    return _target_machine().emit_assembly(_parse(codegen_module))


def evaluate_module(codegen_module):
    """JIT the module and return what its ``main`` computes."""
    mod = _parse(codegen_module)
    with llvm.create_mcjit_compiler(mod, _target_machine()) as engine:
        engine.finalize_object()
        engine.run_static_constructors()
        main = CFUNCTYPE(c_int64)(engine.get_function_address("main"))
        return main()
