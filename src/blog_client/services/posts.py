"""Post store: list and current-post projections over remote posts."""

from dataclasses import dataclass, field, replace

from blog_client.adapters.blog_api_client import BlogApiClient
from blog_client.domain.operations import Operation, OperationPhase, OperationStatus
from blog_client.domain.posts import Post, PostDraft
from blog_client.services import consistency
from blog_client.services.lifecycle import OperationLifecycle


@dataclass(frozen=True)
class PostsState:
    """Snapshot of the posts category."""

    posts: tuple[Post, ...] = ()
    current_post: Post | None = None
    status: OperationStatus = field(default_factory=OperationStatus)

    @property
    def not_found(self) -> bool:
        """True once a fetch-by-id completed without filling the current slot."""
        return (
            self.current_post is None
            and self.status.operation is Operation.FETCH_POST
            and self.status.phase in {OperationPhase.SUCCEEDED, OperationPhase.FAILED}
        )


@dataclass
class PostStore:
    """Remote post operations merged into list and detail projections."""

    client: BlogApiClient
    lifecycle: OperationLifecycle[PostsState] = field(
        default_factory=lambda: OperationLifecycle(PostsState())
    )

    @property
    def state(self) -> PostsState:
        """Current posts snapshot."""
        return self.lifecycle.state

    async def fetch_posts(self) -> tuple[Post, ...]:
        """Load all posts, replacing the list wholesale."""

        async def call() -> tuple[Post, ...]:
            payload = await self.client.request("GET", "/posts")
            return tuple(Post.model_validate(item) for item in payload or [])

        return await self.lifecycle.run(
            Operation.FETCH_POSTS,
            call,
            lambda state, posts: replace(state, posts=posts),
        )

    async def fetch_post(self, post_id: str) -> Post | None:
        """Load one post into the current-post slot.

        An empty response leaves the slot unset so views can show not-found.
        """

        async def call() -> Post | None:
            payload = await self.client.request("GET", f"/posts/{post_id}")
            return None if payload is None else Post.model_validate(payload)

        return await self.lifecycle.run(
            Operation.FETCH_POST,
            call,
            lambda state, post: replace(state, current_post=post),
        )

    async def create_post(self, draft: PostDraft) -> Post:
        """Create a post and place it at the head of the list."""

        async def call() -> Post:
            payload = await self.client.request(
                "POST", "/posts", json=draft.to_payload()
            )
            return Post.model_validate(payload)

        return await self.lifecycle.run(
            Operation.CREATE_POST,
            call,
            lambda state, post: replace(
                state, posts=consistency.prepend(state.posts, post)
            ),
        )

    async def update_post(self, post_id: str, draft: PostDraft) -> Post:
        """Update a post; the server copy replaces both projections."""

        async def call() -> Post:
            payload = await self.client.request(
                "PUT", f"/posts/{post_id}", json=draft.to_payload()
            )
            return Post.model_validate(payload)

        return await self.lifecycle.run(
            Operation.UPDATE_POST,
            call,
            lambda state, post: replace(
                state,
                posts=consistency.replace_by_id(state.posts, post),
                current_post=post,
            ),
        )

    async def delete_post(self, post_id: str) -> str:
        """Delete a post, drop it from the list and clear the current slot.

        The current slot is cleared whatever post it holds; callers navigate
        away from the detail view after deleting.
        """

        async def call() -> str:
            await self.client.request("DELETE", f"/posts/{post_id}")
            return post_id

        return await self.lifecycle.run(
            Operation.DELETE_POST,
            call,
            lambda state, deleted_id: replace(
                state,
                posts=consistency.remove_by_id(state.posts, deleted_id),
                current_post=None,
            ),
        )

    def clear_current_post(self) -> None:
        """Empty the current-post slot."""
        self.lifecycle.commit(replace(self.state, current_post=None))

    def clear_error(self) -> None:
        """Drop the posts failure reason."""
        self.lifecycle.clear_error()
