"""The tokenizer's state stack of nested rule contexts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from giallo.scope import Scope

ROOT_RULE_ID = 0


@dataclass(frozen=True, order=True)
class RuleRef:
    """A rule identified by its grammar and its index in that grammar."""

    grammar: int
    rule: int


@dataclass
class StackFrame:
    """One nested context entered by a begin/end or begin/while rule."""

    rule_ref: RuleRef
    # Scopes applied to the begin/end delimiters
    name_scopes: list[Scope] = field(default_factory=list)
    # Scopes applied to the content between the delimiters
    content_scopes: list[Scope] = field(default_factory=list)
    # End/while pattern with backreferences filled in, if any
    end_pattern: str | None = None
    # The begin match reached the end of the line, so the next line anchors at 0
    begin_rule_has_captured_eol: bool = False
    anchor_position: int | None = None
    # Where this rule was entered on the current line; used to stop endless loops
    enter_position: int | None = None

    def copy(self) -> StackFrame:
        return replace(
            self,
            name_scopes=list(self.name_scopes),
            content_scopes=list(self.content_scopes),
        )


@dataclass
class StateStack:
    """Frames from the root context to the current one; never empty."""

    frames: list[StackFrame]

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("a state stack needs at least one frame")

    @classmethod
    def for_grammar(cls, grammar_id: int, grammar_scope: Scope) -> StateStack:
        """A stack holding only the root rule of a grammar."""
        root = StackFrame(
            rule_ref=RuleRef(grammar_id, ROOT_RULE_ID),
            name_scopes=[grammar_scope],
            content_scopes=[grammar_scope],
        )
        return cls([root])

    def copy(self) -> StateStack:
        """An independent copy of the stack and its frames."""
        return StateStack([frame.copy() for frame in self.frames])

    def push(
        self,
        rule_ref: RuleRef,
        anchor_position: int | None,
        begin_rule_has_captured_eol: bool,
        enter_position: int | None,
    ) -> None:
        """Enter a nested context inheriting the current content scopes."""
        content_scopes = list(self.top().content_scopes)
        self.frames.append(
            StackFrame(
                rule_ref=rule_ref,
                name_scopes=list(content_scopes),
                content_scopes=content_scopes,
                begin_rule_has_captured_eol=begin_rule_has_captured_eol,
                anchor_position=anchor_position,
                enter_position=enter_position,
            )
        )

    def push_with_scopes(
        self,
        rule_ref: RuleRef,
        anchor_position: int | None,
        begin_rule_has_captured_eol: bool,
        enter_position: int | None,
        scopes: list[Scope],
    ) -> None:
        """Enter a nested context with the given scopes as name and content."""
        self.frames.append(
            StackFrame(
                rule_ref=rule_ref,
                name_scopes=list(scopes),
                content_scopes=list(scopes),
                begin_rule_has_captured_eol=begin_rule_has_captured_eol,
                anchor_position=anchor_position,
                enter_position=enter_position,
            )
        )

    def set_content_scopes(self, content_scopes: list[Scope]) -> None:
        self.top().content_scopes = list(content_scopes)

    def set_end_pattern(self, end_pattern: str) -> None:
        self.top().end_pattern = end_pattern

    def pop(self) -> StackFrame | None:
        """Leave the current context; the root frame is never removed."""
        if len(self.frames) > 1:
            return self.frames.pop()
        return None

    def safe_pop(self) -> None:
        """Pop without going below the root frame."""
        if len(self.frames) > 1:
            self.frames.pop()

    def reset(self) -> None:
        """Forget per-line positions in every frame."""
        for frame in self.frames:
            frame.enter_position = None
            frame.anchor_position = None

    def top(self) -> StackFrame:
        """The innermost frame."""
        return self.frames[-1]

    def __len__(self) -> int:
        return len(self.frames)

    def __str__(self) -> str:
        lines = ["StateStack:"]
        for depth, frame in enumerate(self.frames):
            parts = [
                f"{'  ' * depth}grammar={frame.rule_ref.grammar}, "
                f"rule={frame.rule_ref.rule}"
            ]
            if frame.name_scopes:
                names = ", ".join(str(s) for s in frame.name_scopes)
                parts.append(f" name=[{names}]")
            if frame.content_scopes:
                content = ", ".join(str(s) for s in frame.content_scopes)
                parts.append(f", content=[{content}]")
            if frame.end_pattern is not None:
                parts.append(f', end_pattern="{frame.end_pattern}"')
            anchor = "None" if frame.anchor_position is None else (
                f"Some({frame.anchor_position})"
            )
            parts.append(f", anchor_pos={anchor}")
            if (
                frame.enter_position is not None
                and frame.anchor_position != frame.enter_position
            ):
                parts.append(f", enter_pos={frame.enter_position}")
            eol = str(frame.begin_rule_has_captured_eol).lower()
            parts.append(f", begin_rule_has_captured_eol={eol}")
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"