import time
from typing import Optional, Tuple

from pydantic import BaseModel
from pysauce import combine_handlers, create_reducer, on

from todo_actions import Types, Creators


# ====== Model Definition ======
class Todo(BaseModel):
    id: int
    text: str
    done: bool = False


class TodoState(BaseModel):
    todos: Tuple[Todo, ...] = ()
    next_id: int = 1
    last_updated: Optional[float] = None


# ====== Handlers ======
def add_todo_handler(state: TodoState, action) -> TodoState:
    todo = Todo(id=state.next_id, text=action["text"])
    return state.model_copy(update={
        "todos": state.todos + (todo,),
        "next_id": state.next_id + 1,
        "last_updated": time.time(),
    })


def toggle_todo_handler(state: TodoState, action) -> TodoState:
    if not any(t.id == action["id"] for t in state.todos):
        return state  # 找不到就返回原狀態，保持引用不變
    todos = tuple(
        t.model_copy(update={"done": not t.done}) if t.id == action["id"] else t
        for t in state.todos
    )
    return state.model_copy(update={"todos": todos, "last_updated": time.time()})


def remove_todo_handler(state: TodoState, action) -> TodoState:
    todos = tuple(t for t in state.todos if t.id != action["id"])
    if len(todos) == len(state.todos):
        return state
    return state.model_copy(update={"todos": todos, "last_updated": time.time()})


def clear_completed_handler(state: TodoState, action) -> TodoState:
    todos = tuple(t for t in state.todos if not t.done)
    return state.model_copy(update={"todos": todos, "last_updated": time.time()})


def load_todos_success_handler(state: TodoState, action) -> TodoState:
    todos = tuple(Todo(id=i, text=text) for i, text in enumerate(action["todos"], start=1))
    return TodoState(todos=todos, next_id=len(todos) + 1, last_updated=time.time())


# ====== Reducer ======
todo_reducer = create_reducer(
    TodoState(),
    combine_handlers(
        on(Creators.addTodo, add_todo_handler),
        on(Creators.toggleTodo, toggle_todo_handler),
        on(Creators.removeTodo, remove_todo_handler),
        on(Creators.clearCompleted, clear_completed_handler),
        # 自定義生成器沒有 type 屬性，改用類型表
        on(Types.loadTodosSuccess, load_todos_success_handler),
    ),
)
