"""
이벤트 선택 상태

사용 예시:
```python
from core.selection import SelectionController

controller = SelectionController(catalog.events)
controller.set_active({"ev_2"})
events = controller.active_events()
```
"""

from core.selection.controller import EventOption, SelectionController

__all__ = [
    "SelectionController",
    "EventOption",
]
