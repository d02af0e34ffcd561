def convert_to_destructured_input(text: str) -> str:
    """
    Turn a typed parameter list into a destructured object parameter.

    "a: string, b: number" becomes "{ a, b }: { a: string, b: number }".
    Parameters without a type annotation are typed `any`.
    """
    names = []
    members = []

    for param in text.split(","):
        name, _, annotation = param.partition(":")
        name = name.strip()
        annotation = annotation.strip() or "any"
        names.append(name)
        members.append(f"{name}: {annotation}")

    return f"{{ {', '.join(names)} }}: {{ {', '.join(members)} }}"
