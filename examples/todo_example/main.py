import json
import logging

from pysauce import to_dict

from todo_actions import Creators
from todo_reducers import todo_reducer

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

if __name__ == "__main__":
    # pysauce 不提供 store，狀態由調用者自己保存
    state = todo_reducer()

    actions = [
        Creators.loadTodosSuccess(["buy milk", "walk dog"]),
        Creators.addTodo("write report"),
        Creators.toggleTodo(1),
        Creators.removeTodo(2),
        Creators.toggleTodo(99),  # 不存在的 id，狀態不變
        Creators.clearCompleted(),
        {"type": "UNKNOWN"},  # 沒有處理器，狀態不變
        None,
    ]

    print("\n==== 開始分發 actions ====")
    for action in actions:
        prev_state = state
        state = todo_reducer(state, action)
        changed = "changed" if state is not prev_state else "unchanged"
        print(f"{json.dumps(to_dict(action), ensure_ascii=False)} -> {changed}")

    print("\n==== 最終狀態 ====")
    print(json.dumps(to_dict(state), ensure_ascii=False, indent=2))
