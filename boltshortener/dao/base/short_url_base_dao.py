"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., in-process memory, Redis).

Responsibilities:
    - Provide an interface for creating, looking up and listing ShortURLModel objects.
    - Own the counter that assigns shortcodes in creation order.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from boltshortener.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = dao.create("https://example.com/blog/article-123")
        >>> short_url.shortcode
        1

        >>> dao.find_by_target("https://example.com/blog/article-123").shortcode
        1

        >>> dao.get(1).target
        'https://example.com/blog/article-123'

        >>> dao.count()
        1
"""

from abc import ABC, abstractmethod

from boltshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        get(shortcode: int, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        find_by_target(target: str, **kwargs) -> ShortURLModel | None:
            Retrieve a ShortURLModel by its exact original URL.
            Returns None if no mapping exists for this URL.
            Raises DataStoreError on connection or read failure.

        create(target: str, **kwargs) -> ShortURLModel:
            Assign the next shortcode and persist a new mapping.
            Returns the existing mapping if another writer stored the same
            target first.
            Raises DataStoreError on connection or write failure.

        list(limit: int, **kwargs) -> list[ShortURLModel]:
            Return up to `limit` mappings, newest first.
            Raises DataStoreError on connection or read failure.

        count(increment: bool, **kwargs) -> int:
            Return counter from data store.
            Optionally increment counter before retrieving.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLMemoryDAO or
        ShortURLRedisDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Mappings are never updated or deleted. The DAO does not provide
          an interface to do either.
        - The counter is owned by the DAO instance (or its data store). It only
          ever grows, so shortcodes are never reused.
    """

    @abstractmethod
    def get(self, shortcode: int, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (int):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def find_by_target(self, target: str, **kwargs) -> ShortURLModel | None:
        """Retrieve a ShortURLModel by its original URL (exact string match).

        Args:
            target (str):
                The original URL.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel | None: The ShortURLModel instance if found, otherwise None.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def create(self, target: str, **kwargs) -> ShortURLModel:
        """Assign the next shortcode to `target` and persist the mapping.

        Args:
            target (str):
                The original URL. Must already be validated.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The newly created mapping, or the mapping stored by a
            concurrent writer for the same target.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def list(self, limit: int, **kwargs) -> list[ShortURLModel]:
        """Return up to `limit` mappings ordered by descending shortcode.

        Args:
            limit (int):
                Maximum number of mappings to return.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[ShortURLModel]: Mappings, newest first.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def count(self, increment: bool = False, **kwargs) -> int:
        """Retrieve the current counter value from the data store.

        The counter equals the highest shortcode assigned so far (0 if none).

        Args:
            increment (bool):
                If True, increment the counter by 1 before returning the value.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The current counter value.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
