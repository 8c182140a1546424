"""Built-in language table for Diffreel."""

from diffreel.lang.base import LanguageSpec, LanguageTable

C_STYLE_COMMENTS = {
    "line_comments": ("//",),
    "block_comments": (("/*", "*/"),),
}

JAVASCRIPT_KEYWORDS = frozenset({
    "async", "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "export", "extends",
    "false", "finally", "for", "from", "function", "if", "import", "in",
    "instanceof", "let", "new", "null", "return", "super", "switch", "this",
    "throw", "true", "try", "typeof", "undefined", "var", "void", "while",
    "with", "yield",
})

TYPESCRIPT_KEYWORDS = JAVASCRIPT_KEYWORDS | frozenset({
    "abstract", "any", "as", "boolean", "constructor", "declare", "enum",
    "get", "implements", "interface", "module", "namespace", "never",
    "number", "object", "package", "private", "protected", "public",
    "readonly", "set", "static", "string", "symbol", "type", "unique",
    "unknown",
})

C_KEYWORDS = frozenset({
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if",
    "inline", "int", "long", "register", "return", "short", "signed",
    "sizeof", "static", "struct", "switch", "typedef", "union", "unsigned",
    "void", "volatile", "while", "NULL",
})

CPP_KEYWORDS = C_KEYWORDS | frozenset({
    "bool", "catch", "class", "constexpr", "delete", "explicit", "false",
    "friend", "namespace", "new", "noexcept", "nullptr", "operator",
    "override", "private", "protected", "public", "template", "this",
    "throw", "true", "try", "typename", "using", "virtual",
})

PYTHON = LanguageSpec(
    name="python",
    extensions=frozenset({".py", ".pyi"}),
    aliases=frozenset({"py"}),
    keywords=frozenset({
        "and", "as", "assert", "async", "await", "break", "class", "continue",
        "def", "del", "elif", "else", "except", "False", "finally", "for",
        "from", "global", "if", "import", "in", "is", "lambda", "None",
        "nonlocal", "not", "or", "pass", "raise", "return", "True", "try",
        "while", "with", "yield",
    }),
    line_comments=("#",),
    string_delimiters=('"""', "'''", '"', "'"),
)

JAVASCRIPT = LanguageSpec(
    name="javascript",
    extensions=frozenset({".js", ".mjs", ".cjs"}),
    aliases=frozenset({"js", "node"}),
    keywords=JAVASCRIPT_KEYWORDS,
    string_delimiters=('"', "'", "`"),
    **C_STYLE_COMMENTS,
)

JSX = LanguageSpec(
    name="jsx",
    extensions=frozenset({".jsx"}),
    keywords=JAVASCRIPT_KEYWORDS,
    string_delimiters=('"', "'", "`"),
    **C_STYLE_COMMENTS,
)

TYPESCRIPT = LanguageSpec(
    name="typescript",
    extensions=frozenset({".ts", ".mts", ".cts"}),
    aliases=frozenset({"ts"}),
    keywords=TYPESCRIPT_KEYWORDS,
    string_delimiters=('"', "'", "`"),
    **C_STYLE_COMMENTS,
)

TSX = LanguageSpec(
    name="tsx",
    extensions=frozenset({".tsx"}),
    keywords=TYPESCRIPT_KEYWORDS,
    string_delimiters=('"', "'", "`"),
    **C_STYLE_COMMENTS,
)

JAVA = LanguageSpec(
    name="java",
    extensions=frozenset({".java"}),
    keywords=frozenset({
        "abstract", "assert", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "default", "do", "double",
        "else", "enum", "extends", "false", "final", "finally", "float",
        "for", "goto", "if", "implements", "import", "instanceof", "int",
        "interface", "long", "native", "new", "null", "package", "private",
        "protected", "public", "return", "short", "static", "strictfp",
        "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "true", "try", "var", "void", "volatile", "while",
    }),
    string_delimiters=('"""', '"', "'"),
    **C_STYLE_COMMENTS,
)

KOTLIN = LanguageSpec(
    name="kotlin",
    extensions=frozenset({".kt", ".kts"}),
    keywords=frozenset({
        "as", "break", "class", "continue", "do", "else", "false", "for",
        "fun", "if", "in", "interface", "is", "null", "object", "package",
        "return", "super", "this", "throw", "true", "try", "typealias",
        "val", "var", "when", "while", "catch", "finally", "import",
        "private", "public", "internal", "override", "data", "sealed",
    }),
    string_delimiters=('"""', '"', "'"),
    **C_STYLE_COMMENTS,
)

SWIFT = LanguageSpec(
    name="swift",
    extensions=frozenset({".swift"}),
    keywords=frozenset({
        "as", "break", "case", "catch", "class", "continue", "default",
        "defer", "do", "else", "enum", "extension", "false", "for", "func",
        "guard", "if", "import", "in", "init", "let", "nil", "private",
        "protocol", "public", "return", "self", "static", "struct", "switch",
        "throw", "throws", "true", "try", "var", "where", "while",
    }),
    string_delimiters=('"""', '"'),
    **C_STYLE_COMMENTS,
)

GO = LanguageSpec(
    name="go",
    extensions=frozenset({".go"}),
    aliases=frozenset({"golang"}),
    keywords=frozenset({
        "break", "case", "chan", "const", "continue", "default", "defer",
        "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
        "interface", "map", "package", "range", "return", "select", "struct",
        "switch", "type", "var", "nil", "true", "false",
    }),
    string_delimiters=('"', "'", "`"),
    **C_STYLE_COMMENTS,
)

RUST = LanguageSpec(
    name="rust",
    extensions=frozenset({".rs"}),
    aliases=frozenset({"rs"}),
    keywords=frozenset({
        "as", "async", "await", "break", "const", "continue", "crate", "dyn",
        "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
        "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
        "self", "Self", "static", "struct", "super", "trait", "true", "type",
        "unsafe", "use", "where", "while",
    }),
    string_delimiters=('"',),
    **C_STYLE_COMMENTS,
)

C = LanguageSpec(
    name="c",
    extensions=frozenset({".c", ".h"}),
    keywords=C_KEYWORDS,
    string_delimiters=('"', "'"),
    **C_STYLE_COMMENTS,
)

CPP = LanguageSpec(
    name="cpp",
    extensions=frozenset({".cpp", ".cc", ".cxx", ".hpp", ".hh"}),
    aliases=frozenset({"c++"}),
    keywords=CPP_KEYWORDS,
    string_delimiters=('"', "'"),
    **C_STYLE_COMMENTS,
)

CSHARP = LanguageSpec(
    name="csharp",
    extensions=frozenset({".cs"}),
    aliases=frozenset({"c#", "cs"}),
    keywords=frozenset({
        "abstract", "as", "async", "await", "base", "bool", "break", "case",
        "catch", "class", "const", "continue", "default", "do", "else",
        "enum", "false", "finally", "for", "foreach", "if", "in", "int",
        "interface", "internal", "is", "namespace", "new", "null", "override",
        "private", "protected", "public", "readonly", "return", "sealed",
        "static", "string", "struct", "switch", "this", "throw", "true",
        "try", "using", "var", "virtual", "void", "while",
    }),
    string_delimiters=('"', "'"),
    **C_STYLE_COMMENTS,
)

PHP = LanguageSpec(
    name="php",
    extensions=frozenset({".php"}),
    keywords=frozenset({
        "abstract", "array", "as", "break", "case", "catch", "class", "const",
        "continue", "default", "echo", "else", "elseif", "extends", "false",
        "finally", "fn", "for", "foreach", "function", "if", "implements",
        "interface", "namespace", "new", "null", "private", "protected",
        "public", "return", "static", "switch", "throw", "trait", "true",
        "try", "use", "while",
    }),
    line_comments=("//", "#"),
    block_comments=(("/*", "*/"),),
    string_delimiters=('"', "'"),
)

RUBY = LanguageSpec(
    name="ruby",
    extensions=frozenset({".rb", ".rake"}),
    filenames=frozenset({"Gemfile", "Rakefile"}),
    aliases=frozenset({"rb"}),
    keywords=frozenset({
        "alias", "and", "begin", "break", "case", "class", "def", "defined?",
        "do", "else", "elsif", "end", "ensure", "false", "for", "if", "in",
        "module", "next", "nil", "not", "or", "raise", "redo", "rescue",
        "retry", "return", "self", "super", "then", "true", "unless",
        "until", "when", "while", "yield",
    }),
    line_comments=("#",),
    string_delimiters=('"', "'"),
)

BASH = LanguageSpec(
    name="bash",
    extensions=frozenset({".sh", ".bash", ".zsh"}),
    aliases=frozenset({"sh", "shell", "zsh"}),
    keywords=frozenset({
        "case", "do", "done", "elif", "else", "esac", "exit", "export", "fi",
        "for", "function", "if", "in", "local", "return", "then", "until",
        "while",
    }),
    line_comments=("#",),
    string_delimiters=('"', "'"),
)

SQL = LanguageSpec(
    name="sql",
    extensions=frozenset({".sql"}),
    keywords=frozenset({
        "add", "alter", "and", "as", "asc", "begin", "by", "case", "commit",
        "create", "delete", "desc", "distinct", "drop", "else", "end",
        "exists", "from", "group", "having", "in", "index", "insert", "into",
        "is", "join", "key", "left", "limit", "not", "null", "on", "or",
        "order", "primary", "references", "right", "rollback", "select",
        "set", "table", "then", "union", "update", "values", "when", "where",
    }),
    line_comments=("--",),
    block_comments=(("/*", "*/"),),
    string_delimiters=("'", '"'),
    case_sensitive=False,
)

CSS = LanguageSpec(
    name="css",
    extensions=frozenset({".css", ".scss", ".less"}),
    aliases=frozenset({"scss", "less"}),
    keywords=frozenset({
        "important", "inherit", "initial", "unset", "auto", "none", "normal",
        "bold", "italic", "left", "right", "center", "block", "inline",
        "flex", "grid", "absolute", "relative", "fixed", "static", "sticky",
    }),
    block_comments=(("/*", "*/"),),
    string_delimiters=('"', "'"),
)

HTML = LanguageSpec(
    name="html",
    extensions=frozenset({".html", ".htm", ".xml", ".svg"}),
    aliases=frozenset({"xml"}),
    block_comments=(("<!--", "-->"),),
    string_delimiters=('"', "'"),
)

JSON = LanguageSpec(
    name="json",
    extensions=frozenset({".json"}),
    keywords=frozenset({"true", "false", "null"}),
    string_delimiters=('"',),
)

YAML = LanguageSpec(
    name="yaml",
    extensions=frozenset({".yaml", ".yml"}),
    aliases=frozenset({"yml"}),
    keywords=frozenset({"true", "false", "null", "yes", "no"}),
    line_comments=("#",),
    string_delimiters=('"', "'"),
)

TOML = LanguageSpec(
    name="toml",
    extensions=frozenset({".toml"}),
    keywords=frozenset({"true", "false"}),
    line_comments=("#",),
    string_delimiters=('"""', "'''", '"', "'"),
)

DOCKERFILE = LanguageSpec(
    name="dockerfile",
    extensions=frozenset({".dockerfile"}),
    filenames=frozenset({"Dockerfile", "Containerfile"}),
    aliases=frozenset({"docker"}),
    keywords=frozenset({
        "from", "run", "cmd", "label", "expose", "env", "add", "copy",
        "entrypoint", "volume", "user", "workdir", "arg", "onbuild",
        "healthcheck", "shell", "as",
    }),
    line_comments=("#",),
    string_delimiters=('"', "'"),
    case_sensitive=False,
)

MAKEFILE = LanguageSpec(
    name="make",
    extensions=frozenset({".mk"}),
    filenames=frozenset({"Makefile", "GNUmakefile"}),
    aliases=frozenset({"makefile"}),
    keywords=frozenset({"ifeq", "ifneq", "ifdef", "ifndef", "else", "endif", "include", "define", "endef"}),
    line_comments=("#",),
    string_delimiters=('"', "'"),
)

TEXT = LanguageSpec(name="text")

BUILTIN_LANGUAGES: tuple[LanguageSpec, ...] = (
    TYPESCRIPT,
    TSX,
    JAVASCRIPT,
    JSX,
    PYTHON,
    JAVA,
    KOTLIN,
    SWIFT,
    GO,
    RUST,
    C,
    CPP,
    CSHARP,
    PHP,
    RUBY,
    BASH,
    SQL,
    CSS,
    HTML,
    JSON,
    YAML,
    TOML,
    DOCKERFILE,
    MAKEFILE,
)

DEFAULT_TABLE = LanguageTable(BUILTIN_LANGUAGES, default=TEXT)
