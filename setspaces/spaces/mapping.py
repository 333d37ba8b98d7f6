from functools import singledispatchmethod


class Surjection(object):
    """
    A total, deterministic mapping of every value of a source type onto a value of this space.

    A single class can map several unrelated source types onto the same space: subclasses define ``map``
    as a ``functools.singledispatchmethod`` and register one implementation per source type.
    Mapping a value whose type has no registered implementation raises ``TypeError``.

    Example::

        class Binary(FiniteSpace, Surjection):

            @singledispatchmethod
            def map(self, value):
                return self.unmapped(value)

            @map.register(numbers.Real)
            def _(self, value):
                return value > 0.0

    """

    @singledispatchmethod
    def map(self, value):
        """
        Map value from the domain onto the codomain.
        """
        return self.unmapped(value)

    def unmapped(self, value):
        raise TypeError("{} does not map values of type {}".format(self.__class__.__name__, type(value).__name__))

    def map_onto(self, value):
        return self.map(value)
