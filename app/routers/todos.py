# =============================================================================
# app/routers/todos.py - Todo Endpoints
# =============================================================================
# Handles todo CRUD. Every endpoint acts on behalf of the user named in the
# `username` request header.
#
# Endpoints:
# - GET /todos: List the user's todos
# - POST /todos: Create a todo (free plan limited)
# - PUT /todos/{todo_id}: Replace title and deadline
# - PATCH /todos/{todo_id}/done: Mark as done
# - DELETE /todos/{todo_id}: Delete
# =============================================================================

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import (
    CapacityCheckedUserDep,
    ExistingUserDep,
    TodoContextDep,
    require_existing_user,
)
from core.models.todo import Todo, TodoCreate, TodoUpdate
from core.services.todo_service import TodoService

router = APIRouter()


@router.get("", response_model=list[Todo])
async def list_todos(user: ExistingUserDep):
    """List the user's todos in creation order."""
    return TodoService.list_todos(user)


@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
async def create_todo(user: CapacityCheckedUserDep, request: TodoCreate):
    """
    Create a todo.

    Users without the pro plan can hold at most FREE_PLAN_TODO_LIMIT
    todos (10 by default); past that this returns 403.
    """
    return TodoService.create_todo(user, title=request.title, deadline=request.deadline)


@router.put("/{todo_id}", response_model=Todo)
async def update_todo(context: TodoContextDep, request: TodoUpdate):
    """Replace a todo's title and deadline."""
    return TodoService.update_todo(context.todo, title=request.title, deadline=request.deadline)


@router.patch("/{todo_id}/done", response_model=Todo)
async def mark_todo_done(context: TodoContextDep):
    """Mark a todo as done."""
    return TodoService.mark_done(context.todo)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_existing_user)],
)
async def delete_todo(context: TodoContextDep):
    """
    Delete a todo.

    Returns 204 with no body. Deleting the same id again returns 404.
    """
    TodoService.delete_todo(context.user, context.todo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
