"""
Placeholder substitution for export filename and path templates.
File: photo_vars/substitution/template_engine.py

Handles templates like "$(FILE.FOLDER)/darktable_exported/$(FILE.NAME%.CR2)"
where each $(...) token names a placeholder and may carry one modifier.
"""

import logging

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, Optional

from photo_vars.core.exceptions import MalformedTokenError
from photo_vars.core.metadata import ImageMetadata
from photo_vars.core.system_context import SystemContext
from photo_vars.substitution.modifiers import ModifierOp, apply_modifier, parse_modifier
from photo_vars.substitution.placeholders import build_substitution_list, canonical_name
from photo_vars.substitution.substitution_regex_patterns import TOKEN_RGX, PLACEHOLDER_NAME_RGX


logger = logging.getLogger(__name__)


STATUS_OK = "ok"
STATUS_UNKNOWN = "unknown"
STATUS_MALFORMED = "malformed"


@dataclass(frozen=True)
class Token:
    """A $(...) occurrence in a template."""
    text: str                       # full token text, e.g. "$(FILE.NAME:0:3)"
    body: str                       # text between "$(" and the closing ")"
    name: Optional[str]             # leading name as written, None if there is none
    modifier: str                   # remainder of the body after the name

    @property
    def canonical(self) -> Optional[str]:
        return canonical_name(self.name) if self.name else None


@dataclass(frozen=True)
class TokenResult:
    """Outcome of evaluating one token against a registry."""
    token: Token
    status: str
    value: str
    op: Optional[ModifierOp] = None
    reason: str = ""


def parse_template(template: str) -> list[Token]:
    """
    Find every $(...) token in a template.

    Args:
        template: Template text

    Returns:
        Tokens in the order they appear; tokens without a leading
        placeholder name have name=None
    """
    tokens = []
    for match in TOKEN_RGX.finditer(template):
        body = match.group(1)
        name_match = PLACEHOLDER_NAME_RGX.match(body)
        name = name_match.group(0) if name_match else None
        modifier = body[len(name):] if name else body
        tokens.append(Token(text=match.group(0), body=body, name=name, modifier=modifier))
    return tokens


def evaluate_token(token: Token, registry: Mapping) -> TokenResult:
    """Resolve one token: look up its placeholder and apply its modifier."""
    if token.name is None:
        return TokenResult(token, STATUS_MALFORMED, token.text, reason="no placeholder name")

    var = token.canonical
    logger.debug("var_string is %r and var is %s", token.body, var)

    if var not in registry:
        return TokenResult(token, STATUS_UNKNOWN, "",
                           reason=f"variable {var} is not an allowed variable")

    op = parse_modifier(token.modifier)
    try:
        value = apply_modifier(op, registry[var], registry)
    except MalformedTokenError as e:
        return TokenResult(token, STATUS_MALFORMED, token.text, op=op, reason=e.reason or str(e))

    return TokenResult(token, STATUS_OK, value, op=op)


def substitute_list(template: str, registry: Mapping) -> str:
    """
    Replace the tokens in a template with values from a built registry.

    Unknown placeholders become "" and malformed tokens are left as they
    are; both are logged as warnings. Every verbatim occurrence of a
    token's text is replaced, not only the one found by the scan.

    Args:
        template: Template text
        registry: Registry from build_substitution_list()

    Returns:
        The template with tokens replaced
    """
    result = template
    for token in parse_template(template):
        outcome = evaluate_token(token, registry)

        if outcome.status == STATUS_MALFORMED:
            logger.warning("Malformed token %s (%s), leaving it as is",
                           token.text, outcome.reason)
            continue
        if outcome.status == STATUS_UNKNOWN:
            logger.warning("%s, returning empty value", outcome.reason)

        logger.debug("var is %r and treated var is %r", token.body, outcome.value)
        result = result.replace(token.text, outcome.value)

    return result


def substitute(template: str, image: ImageMetadata, sequence: Any,
               username: Optional[str] = None,
               pic_folder: Optional[str] = None,
               home: Optional[str] = None,
               desktop: Optional[str] = None,
               context: Optional[SystemContext] = None) -> str:
    """
    Substitute placeholders in a template for one image.

    Builds a new registry for this call, so concurrent calls never share state.

    Args:
        template: Template text with $(...) tokens
        image: Metadata of the image being processed
        sequence: Sequence number of the image
        username: User name (derived if not supplied)
        pic_folder: Pictures folder (derived if not supplied)
        home: Home folder (derived if not supplied)
        desktop: Desktop folder (derived if not supplied)
        context: Prebuilt SystemContext (app version, clock, folders)

    Returns:
        The template with tokens replaced
    """
    registry = build_substitution_list(image, sequence, username, pic_folder, home,
                                       desktop, context=context)
    return substitute_list(template, registry)


def preview_substitution(template: str, registry: Mapping) -> dict:
    """
    Preview template substitution without hiding how each token resolved.

    Useful for dry-run mode and debugging.

    Args:
        template: Template text
        registry: Registry from build_substitution_list()

    Returns:
        Dictionary with the template, the result and one entry per token
    """
    substitutions = []
    for token in parse_template(template):
        outcome = evaluate_token(token, registry)
        substitutions.append({
            'token': token.text,
            'name': token.name,
            'canonical': token.canonical,
            'modifier': str(outcome.op) if outcome.op else None,
            'value': outcome.value,
            'status': outcome.status,
            'reason': outcome.reason or None,
        })

    return {
        'template': template,
        'result': substitute_list(template, registry),
        'substitutions': substitutions,
    }


class TemplateEngine:
    """
    Substitute templates against a fixed SystemContext.

    Holds no per-image state; every call builds and discards its own registry.

    Examples:
        engine = TemplateEngine()
        engine.substitute("$(FILE.NAME:0:3)", image, 1)    -> "IMG"
        engine.substitute("$(TITLE-$(FILE.NAME))", image, 1) -> "IMG_0001.CR2"
    """

    def __init__(self, context: Optional[SystemContext] = None):
        self.context = context

    def build_registry(self, image: ImageMetadata, sequence: Any, **overrides):
        """Build a registry for one image using this engine's context."""
        return build_substitution_list(image, sequence, context=self.context, **overrides)

    def substitute(self, template: str, image: ImageMetadata, sequence: Any, **overrides) -> str:
        return substitute_list(template, self.build_registry(image, sequence, **overrides))

    def preview(self, template: str, image: ImageMetadata, sequence: Any, **overrides) -> dict:
        return preview_substitution(template, self.build_registry(image, sequence, **overrides))


# End of file #
