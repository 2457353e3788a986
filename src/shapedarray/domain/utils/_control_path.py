"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on an object's runtime state
attribute (for arrays: ``backend``).

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the state attribute of ``self`` and dispatches
  to the registered implementation that matches the current state.

Important notes
---------------
- The first registration replaces the base method on the class with a
  dispatching wrapper; later registrations only add entries to the registry.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Implementations are called like bound methods: ``impl(self, *args, **kwargs)``.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

MissingPathHandler = Callable[[Callable[..., Any], Any], BaseException]
"""Builds the exception raised when no control path matches the state."""


def create_path_builder(
    state_attr: str = "_state",
    on_missing: Optional[MissingPathHandler] = None,
) -> Callable[
    [Type, Callable[P, R], Hashable],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    When `obj.foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `obj.mode`.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute read from ``self`` to select the control path.
        Defaults to ``"_state"``.
    on_missing : Optional[MissingPathHandler], optional
        Called as ``on_missing(method, state)`` when no control path matches;
        the returned exception is raised. Defaults to raising
        `NotImplementedError`.

    Returns
    -------
    Callable
        A function with signature ``(cls, method, state) -> decorator`` where
        ``decorator(sub_method)`` registers ``sub_method`` for that control
        path and installs the dispatcher wrapper on ``cls``.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def _missing(method: Callable[..., Any], state: Any) -> BaseException:
        if on_missing is not None:
            return on_missing(method, state)
        return NotImplementedError(
            "Missing control path (state={}) for {}".format(repr(state), repr(method))
        )

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
        method : Callable[P, R]
            The base method being templated. Its name and metadata are reused
            for the installed wrapper via `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering the implementation.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}") from None

        method_name = method.__name__
        smk: MethodKey = MethodKey(cls.__name__, method_name, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured state.
            """
            methods_map[smk] = sub_method

            if getattr(cls.__dict__.get(method_name), "__control_path__", False):
                return sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the state
                attribute of `self`.
                """
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {} (@property)".format(
                            type(self), repr(state_attr)
                        )
                    )
                cur_state = getattr(self, state_attr)
                if sm := methods_map.get(MethodKey(cls.__name__, method_name, cur_state)):
                    return sm(self, *args, **kwargs)
                raise _missing(method, cur_state)

            wrapper.__control_path__ = True
            setattr(cls, method_name, wrapper)
            return sub_method

        return decorator

    return templator
