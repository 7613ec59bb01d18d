"""
Application Layer.

Команды, запросы, DTO и диспетчер (Mediator), связывающий их с обработчиками.
"""
