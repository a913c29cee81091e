"""Drawing widgets: charts, confirmation, help and notice pop-ups, and the file explorer."""