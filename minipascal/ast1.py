class Node:
    pass

#
# Programa e bloco
#

class Program(Node):
    def __init__(self, name, block):
        self.name = name
        self.block = block

class Block(Node):
    def __init__(self, declarations, compound_statement):
        self.declarations = declarations              # lista de VarDecl
        self.compound_statement = compound_statement  # Compound


#
# Declarações
#

class VarDecl(Node):
    def __init__(self, var_node, type_node):
        self.var_node = var_node    # Var
        self.type_node = type_node  # Type

class Type(Node):
    def __init__(self, token):
        self.token = token
        self.value = token.value  # 'INTEGER' ou 'REAL'


#
# Instruções
#

class Compound(Node):
    def __init__(self, children=None):
        self.children = children or []

class Assign(Node):
    def __init__(self, left, op, right):
        self.left = left    # Var
        self.op = op        # token ASSIGN
        self.right = right

class NoOp(Node):
    pass


#
# Expressões
#

class Var(Node):
    def __init__(self, token):
        self.token = token
        self.value = token.value  # nome da variável

class BinOp(Node):
    def __init__(self, left, op, right):
        self.left = left
        self.op = op  # token do operador
        self.right = right

class UnaryOp(Node):
    def __init__(self, op, expr):
        self.op = op
        self.expr = expr

class Num(Node):
    def __init__(self, token):
        self.token = token
        self.value = token.value


#
# Visualização da árvore
#

def dump(node, indent=0):
    """Devolve a árvore como texto, um nó por linha, indentado por nível."""
    pad = '  ' * indent
    lines = []

    if isinstance(node, Program):
        lines.append(f"{pad}Program {node.name}")
        lines.append(dump(node.block, indent + 1))
    elif isinstance(node, Block):
        lines.append(f"{pad}Block")
        for decl in node.declarations:
            lines.append(dump(decl, indent + 1))
        lines.append(dump(node.compound_statement, indent + 1))
    elif isinstance(node, VarDecl):
        lines.append(f"{pad}VarDecl {node.var_node.value} : {node.type_node.value}")
    elif isinstance(node, Type):
        lines.append(f"{pad}Type {node.value}")
    elif isinstance(node, Compound):
        lines.append(f"{pad}Compound")
        for child in node.children:
            lines.append(dump(child, indent + 1))
    elif isinstance(node, Assign):
        lines.append(f"{pad}Assign {node.left.value}")
        lines.append(dump(node.right, indent + 1))
    elif isinstance(node, NoOp):
        lines.append(f"{pad}NoOp")
    elif isinstance(node, Var):
        lines.append(f"{pad}Var {node.value}")
    elif isinstance(node, BinOp):
        lines.append(f"{pad}BinOp {node.op.type.name}")
        lines.append(dump(node.left, indent + 1))
        lines.append(dump(node.right, indent + 1))
    elif isinstance(node, UnaryOp):
        lines.append(f"{pad}UnaryOp {node.op.type.name}")
        lines.append(dump(node.expr, indent + 1))
    elif isinstance(node, Num):
        lines.append(f"{pad}Num {node.value}")
    else:
        lines.append(f"{pad}<{node!r}>")

    return '\n'.join(lines)
