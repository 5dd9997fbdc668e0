from pysauce import create_actions


def load_todos_success(todos):
    # 自定義生成器：把列表轉為元組再放進 action
    return {"type": "LOAD_TODOS_SUCCESS", "todos": tuple(todos)}


# ====== Actions ======
Types, Creators = create_actions({
    "addTodo": ["text"],
    "toggleTodo": ["id"],
    "removeTodo": ["id"],
    "clearCompleted": None,
    "loadTodosSuccess": load_todos_success,
})
