"""Render prompt and choice-list text from a formatting policy."""


def render_prompt(text, policy, default="", force_question_mark=False):
    """Decorate question text according to the session policy.

    Decorations are applied in a fixed order: question mark, default
    annotation, trailing space. A policy of None applies no decoration.
    force_question_mark adds the question mark even when the policy does not.

    Example with every policy flag on:
        render_prompt("%s", DEFAULT_POLICY, "42") == "%s? [42] "
    """
    result = text
    question_mark = force_question_mark or (policy is not None and policy.append_question_mark)
    if question_mark:
        result += "?"
    if policy is not None and policy.show_default_in_prompt and default:
        result += f" [{default}]"
    if policy is not None and policy.append_space:
        result += " "
    return result


def render_choices(choices):
    return "".join(f"  {position} - {choice}\n" for position, choice in enumerate(choices, 1))
