import re


def substitute(text, params):
    """Replace every `{{key}}` in text with params[key].

    Replacement is literal and happens in one pass, so an inserted value
    that itself contains `{{other}}` is not expanded again. Placeholders
    with no matching key are left untouched.
    """
    if not text or not params or "{{" not in text:
        return text
    # longest first so `{{ab}}` wins over a key that is a prefix of it
    keys = sorted(params, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape("{{" + key + "}}") for key in keys))
    return pattern.sub(lambda m: str(params[m.group(0)[2:-2]]), text)


def render_template(html, params, max_depth=None):
    """Parse html, fill in placeholders everywhere, serialize the result."""
    from .parser import parse
    from .serializer import render

    forest = parse(html, max_depth=max_depth)
    for root in forest:
        root.apply_params_recursive(params)
    return render(forest)
