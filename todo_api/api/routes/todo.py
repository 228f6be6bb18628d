import logging
from typing import List

from fastapi import APIRouter, Request, Response, status

from todo_api.api.dependencies import TodoServiceDep
from todo_api.models.domain.todo import TodoCreate, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todo"])

def with_url(request: Request, todo: TodoResponse) -> TodoResponse:
    todo.url = str(request.url_for("get_todo", todo_id=todo.id))
    return todo


@router.get('', response_model=List[TodoResponse])
async def get_todos(request: Request, service: TodoServiceDep):
    todos = await service.get_todos()
    return [with_url(request, todo) for todo in todos]


@router.get('/pending', response_model=List[TodoResponse])
async def get_pending_todos(request: Request, service: TodoServiceDep):
    todos = await service.get_pending_todos()
    return [with_url(request, todo) for todo in todos]


@router.get('/{todo_id}', response_model=TodoResponse)
async def get_todo(todo_id: str, request: Request, service: TodoServiceDep):
    todo = await service.get_todo(todo_id)
    return with_url(request, todo)


@router.post('', response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
async def create_todo(todo_data: TodoCreate, request: Request, response: Response, service: TodoServiceDep):
    todo = with_url(request, await service.create_todo(todo_data))
    response.headers["Location"] = todo.url
    logger.info(f"Created todo {todo.id}")
    return todo


@router.patch('/{todo_id}', response_model=TodoResponse)
async def update_todo(todo_id: str, todo_data: TodoUpdate, request: Request, service: TodoServiceDep):
    todo = await service.update_todo(todo_id, todo_data)
    return with_url(request, todo)


@router.delete('/{todo_id}')
async def delete_todo(todo_id: str, service: TodoServiceDep):
    await service.delete_todo(todo_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete('')
async def delete_all_todos(service: TodoServiceDep):
    await service.delete_all_todos()
    return Response(status_code=status.HTTP_200_OK)
