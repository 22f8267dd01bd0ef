"""
Render parsed Go type expressions back to source text.

The walker only needs the field type as it would appear in a method
signature, so the printer re-emits the textX type nodes with gofmt spacing.
Inline struct and interface types are printed on a single line.
"""


def type_to_string(node) -> str:
    """Return the Go source text for a type node from grammar/go.tx."""
    kind = type(node).__name__
    printer = _PRINTERS.get(kind)
    if printer is None:
        raise TypeError(f"Unsupported type node: {kind}")
    return printer(node)


def type_params_to_string(type_params) -> str:
    """[K comparable, V any] for a TypeParams node, "" for None."""
    if type_params is None:
        return ""
    parts = [
        f"{', '.join(decl.names)} {_type_elem(decl.constraint)}"
        for decl in type_params.params
    ]
    return f"[{', '.join(parts)}]"


def type_param_names(type_params) -> tuple:
    """Declared type parameter names, in order."""
    if type_params is None:
        return ()
    return tuple(name for decl in type_params.params for name in decl.names)


# ------------------------------------------------------------------------------
# Node printers

def _type_name(node) -> str:
    text = f"{node.qualifier}.{node.name}" if node.qualifier else node.name
    if node.type_args is not None:
        text += "[" + ", ".join(type_to_string(t) for t in node.type_args.types) + "]"
    return text


def _pointer(node) -> str:
    return "*" + type_to_string(node.elem)


def _slice(node) -> str:
    return "[]" + type_to_string(node.elem)


def _array(node) -> str:
    length = " ".join(node.length.split())
    return f"[{length}]{type_to_string(node.elem)}"


def _map(node) -> str:
    return f"map[{type_to_string(node.key)}]{type_to_string(node.value)}"


def _chan(node) -> str:
    if node.recv:
        return "<-chan " + type_to_string(node.elem)
    if node.send:
        return "chan<- " + type_to_string(node.elem)
    return "chan " + type_to_string(node.elem)


def _func(node) -> str:
    return "func" + _signature(node.signature)


def _paren(node) -> str:
    return f"({type_to_string(node.type)})"


def _struct(node) -> str:
    if not node.fields:
        return "struct{}"
    return "struct{ " + "; ".join(_field(f) for f in node.fields) + " }"


def _interface(node) -> str:
    if not node.elems:
        return "interface{}"
    return "interface{ " + "; ".join(_interface_elem(e) for e in node.elems) + " }"


# ------------------------------------------------------------------------------
# Helpers for composite nodes

def _signature(sig) -> str:
    text = f"({_parameters(sig.params)})"
    results = _results(sig.results)
    if results:
        text += " " + results
    return text


def _parameters(params) -> str:
    if params is None:
        return ""
    if type(params).__name__ == "NamedParameters":
        return ", ".join(
            f"{', '.join(group.names)} {'...' if group.variadic else ''}{type_to_string(group.type)}"
            for group in params.groups
        )
    return ", ".join(
        f"{'...' if param.variadic else ''}{type_to_string(param.type)}"
        for param in params.params
    )


def _results(results) -> str:
    if results is None:
        return ""
    if results.type is not None:
        return type_to_string(results.type)
    params = results.params
    if params is None:
        return ""
    # A single unnamed result is printed without parentheses.
    if type(params).__name__ == "UnnamedParameters" and len(params.params) == 1:
        return _parameters(params)
    return f"({_parameters(params)})"


def _field(field) -> str:
    if type(field).__name__ == "EmbeddedField":
        text = ("*" if field.pointer else "") + _type_name(field.type)
    else:
        text = f"{', '.join(field.names)} {type_to_string(field.type)}"
    if field.tag:
        text += " " + field.tag
    return text


def _interface_elem(elem) -> str:
    if type(elem).__name__ == "MethodElem":
        return elem.name + _signature(elem.signature)
    return _type_elem(elem)


def _type_elem(elem) -> str:
    return " | ".join(
        ("~" if term.tilde else "") + type_to_string(term.type)
        for term in elem.terms
    )


_PRINTERS = {
    "TypeName": _type_name,
    "PointerType": _pointer,
    "SliceType": _slice,
    "ArrayType": _array,
    "MapType": _map,
    "ChanType": _chan,
    "FuncType": _func,
    "ParenType": _paren,
    "StructType": _struct,
    "InterfaceType": _interface,
}
