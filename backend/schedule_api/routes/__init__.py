# Routes package init
"""
Schedule API — API Routes Package
==================================

Route Inventory:
    - health.py:    GET  /                                  (info)
                    GET  /health                            (store health check)
    - schedule.py:  GET  /schedule/{user_id}/{semester_id}  (list entries)
                    POST /schedule/add                      (add entry)
                    POST /schedule/remove                   (remove entry)
    - feedback.py:  GET  /feedback                          (list feedback)
                    GET  /feedback/{id}                     (get one)
                    POST /feedback                          (create)

Design Principle:
    Routes are thin: extract the input, call the service, return its result.
"""
